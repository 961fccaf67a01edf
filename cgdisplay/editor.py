"""Editing session over a display file: add, edit, delete and transform shapes."""

from __future__ import annotations

from typing import Any

from cgdisplay.frame import DrawingFrame
from cgdisplay.graphic import GraphicObject, is_valid_color
from cgdisplay.matrix import Matrix
from cgdisplay.point import Point
from cgdisplay.repository import DisplayFile
from cgdisplay.shapes import Circle, Line, Square, Triangle

ADD_LABEL = "Adicionar"
EDIT_LABEL = "Editar"

_FIELD_NAMES = ("x1", "y1", "x2", "y2", "x3", "y3", "radius")


class EditorError(Exception):
    """An editing action was refused; the message says why."""


def visible_fields(shape: str) -> tuple[str, ...]:
    """Return the input fields that the given shape kind uses."""
    if shape in ("Reta", "Quadrado"):
        return ("x1", "y1", "x2", "y2")
    if shape == "Triangulo":
        return ("x1", "y1", "x2", "y2", "x3", "y3")
    if shape == "Circunferencia":
        return ("x1", "y1", "radius")
    return ("x1", "y1")


class Editor:
    """Holds the display file, the chosen colour and the current selection."""

    def __init__(self, frame: DrawingFrame | None = None) -> None:
        self.frame = frame if frame is not None else DrawingFrame()
        self.repository = DisplayFile()
        self.frame.set_repository(self.repository)
        self.shape_names = self.frame.factory.names()
        self.shape = self.shape_names[0] if self.shape_names else ""
        self.values: dict[str, float] = dict.fromkeys(_FIELD_NAMES, 0.0)
        self.color: Any = None
        self.selected = -1
        self.button_label = ADD_LABEL
        self.delete_enabled = False

    @property
    def visible(self) -> tuple[str, ...]:
        return visible_fields(self.shape)

    def choose_color(self, color: Any) -> None:
        """Use ``color`` for new shapes; an invalid colour is ignored."""
        if is_valid_color(color):
            self.color = color

    def draw(
        self,
        shape: str,
        x1: float,
        y1: float,
        x2: float = 0,
        y2: float = 0,
        x3: float = 0,
        y3: float = 0,
        radius: float = 0,
    ) -> GraphicObject | None:
        """Add a shape, or replace the selected one, then clear the selection."""
        if self.color is None or not is_valid_color(self.color):
            raise EditorError("Escolha uma cor antes de desenhar.")
        created = self.frame.add_shape(
            shape, x1, y1, x2, y2, x3, y3, radius, self.color, self.selected
        )
        self.reset_selection()
        return created

    def entries(self) -> list[str]:
        """Descriptions of every object in the display file, in order."""
        return [str(obj) for obj in self.repository]

    def select(self, index: int) -> dict[str, float] | None:
        """Select the object at ``index`` and load its data into the fields."""
        if not 0 <= index < len(self.repository):
            self.selected = -1
            self.button_label = ADD_LABEL
            return None

        obj = self.repository[index]
        self.selected = index
        self.button_label = EDIT_LABEL

        if isinstance(obj, Point):
            self.shape = "Ponto"
            self.values.update(x1=obj.x, y1=obj.y)
        elif isinstance(obj, Line):
            self.shape = "Reta"
            self.values.update(x1=obj.p1.x, y1=obj.p1.y, x2=obj.p2.x, y2=obj.p2.y)
        elif isinstance(obj, Square):
            self.shape = "Quadrado"
            self.values.update(x1=obj.p1.x, y1=obj.p1.y, x2=obj.p2.x, y2=obj.p2.y)
        elif isinstance(obj, Triangle):
            self.shape = "Triangulo"
            self.values.update(
                x1=obj.p1.x, y1=obj.p1.y, x2=obj.p2.x, y2=obj.p2.y, x3=obj.p3.x, y3=obj.p3.y
            )
        elif isinstance(obj, Circle):
            self.shape = "Circunferencia"
            self.values.update(x1=obj.center.x, y1=obj.center.y, radius=obj.radius)

        self.color = obj.color
        self.delete_enabled = True
        return dict(self.values)

    def reset_selection(self) -> None:
        self.selected = -1
        self.button_label = ADD_LABEL
        self.delete_enabled = False

    def delete_selected(self) -> bool:
        """Remove the selected object; return whether anything was removed."""
        if self.selected == -1:
            return False
        self.repository.remove(self.selected)
        self.reset_selection()
        return True

    def transform(
        self,
        scale: tuple[float, float] | None = None,
        rotation: float | None = None,
        translation: tuple[float, float] | None = None,
    ) -> None:
        """Scale, then rotate, then translate the selected object about its centre."""
        if self.selected == -1:
            raise EditorError("Nenhum objeto selecionado.")
        if scale is None and rotation is None and translation is None:
            raise EditorError("Nenhuma transformação selecionada.")

        composed = Matrix.identity(3)
        if scale is not None:
            sx, sy = scale
            if sx == 0 or sy == 0:
                raise EditorError("Por favor, não insira 0 para a escala.")
            composed = Matrix.scaling_2d(sx, sy) @ composed
        if rotation is not None:
            if rotation == 0:
                raise EditorError("Por favor, insira algum valor na rotação.")
            composed = Matrix.rotation_2d(rotation) @ composed
        if translation is not None:
            tx, ty = translation
            if tx == 0 and ty == 0:
                raise EditorError("Por favor, insira valores para a translação.")
            composed = Matrix.translation_2d(tx, ty) @ composed

        self._apply(composed)

        if self.selected == 0:
            window = self.repository[0]
            if isinstance(window, Square):
                self.frame.set_window(window.p1.x, window.p2.y, window.p2.x, window.p1.y)

        self.reset_selection()

    def _apply(self, transform: Matrix) -> None:
        obj = self.repository[self.selected]
        if isinstance(obj, Point):
            obj.apply_transform(transform, obj)
        elif isinstance(obj, (Line, Square, Triangle, Circle)):
            obj.apply_transform(transform)
        else:
            return
        obj.mark_model_transformed()
        obj.reset_viewport_transformed()