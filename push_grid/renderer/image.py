from typing import Dict, List, Optional, Tuple
from PIL import Image, ImageDraw

from push_grid.components.properties.appearance import Appearance, AppearanceName
from push_grid.config import DEFAULT_CELL_SIZE
from push_grid.state import State
from push_grid.types import EntityID
from push_grid.utils.ecs import entity_order


Color = Tuple[int, int, int]

BACKGROUND_COLOR: Color = (100, 149, 237)
OUTLINE_COLOR: Color = (40, 40, 40)
DEFAULT_BORDER = 2

DEFAULT_PALETTE: Dict[AppearanceName, Color] = {
    AppearanceName.NONE: (128, 128, 128),
    AppearanceName.BLOCK: (139, 90, 43),
    AppearanceName.CHARACTER: (241, 196, 15),
}

_FALLBACK_APPEARANCE = Appearance(name=AppearanceName.NONE, priority=100)


def entity_color(appearance: Appearance, palette: Dict[AppearanceName, Color]) -> Color:
    if appearance.color is not None:
        return appearance.color
    return palette.get(appearance.name, DEFAULT_PALETTE[AppearanceName.NONE])


def draw_order(state: State) -> List[EntityID]:
    """
    Entities sorted so that lower priority values are painted last (on top).
    Ties keep registration order.
    """
    def priority(eid: EntityID) -> int:
        return state.appearance.get(eid, _FALLBACK_APPEARANCE).priority

    return sorted(entity_order(state), key=priority, reverse=True)


def render(
    state: State,
    cell_size: int = DEFAULT_CELL_SIZE,
    palette: Optional[Dict[AppearanceName, Color]] = None,
    border: int = DEFAULT_BORDER,
) -> Image.Image:
    """
    Renders ECS state as a PIL Image: one filled square per occupied cell.
    """
    if palette is None:
        palette = DEFAULT_PALETTE

    img = Image.new(
        "RGB", (state.width * cell_size, state.height * cell_size), BACKGROUND_COLOR
    )
    draw = ImageDraw.Draw(img)

    for eid in draw_order(state):
        color = entity_color(state.appearance.get(eid, _FALLBACK_APPEARANCE), palette)
        for cell in state.shape[eid].cells:
            x0, y0 = cell.x * cell_size, cell.y * cell_size
            draw.rectangle(
                (x0, y0, x0 + cell_size - 1, y0 + cell_size - 1),
                fill=color,
                outline=OUTLINE_COLOR,
                width=border,
            )

    return img


class ImageRenderer:
    cell_size: int
    palette: Dict[AppearanceName, Color]
    border: int

    def __init__(
        self,
        cell_size: int = DEFAULT_CELL_SIZE,
        palette: Optional[Dict[AppearanceName, Color]] = None,
        border: int = DEFAULT_BORDER,
    ):
        self.cell_size = cell_size
        self.palette = palette or DEFAULT_PALETTE
        self.border = border

    def render(self, state: State) -> Image.Image:
        return render(
            state,
            cell_size=self.cell_size,
            palette=self.palette,
            border=self.border,
        )
