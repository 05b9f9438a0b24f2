"""Display geometry of an image shown at a zoom level, optionally on a template."""

from __future__ import annotations

from .painting import Painting

_MARGIN = 10


class ViewGeometry:
    """Sizes used to show an image scaled and, for a template, stretched by its ratio."""

    def __init__(self, image_width: int, image_height: int) -> None:
        self.image_width = image_width
        self.image_height = image_height
        self.view_scale = 1.0
        self.painting: Painting | None = None

    def set_view_scale(self, percent: int) -> None:
        """Set the zoom level as a percentage."""
        self.view_scale = percent / 100

    def set_template(self, painting: Painting) -> None:
        """Show the image on ``painting``'s template."""
        self.painting = painting

    def _ratio(self) -> float:
        return self.painting.ratio if self.painting is not None else 1.0

    def target_size(self) -> tuple[int, int]:
        """Size the image is drawn at."""
        return (
            int(self.image_width * self.view_scale * self._ratio()),
            int(self.image_height * self.view_scale),
        )

    def fixed_size(self) -> tuple[int, int]:
        """Size of the drawing area, large enough for the image and the template."""
        scaled_height = int(self.image_height * self.view_scale)
        if self.painting is None:
            width = int(self.image_width * self.view_scale)
            height = scaled_height
        else:
            ratio = self.painting.ratio
            width = max(
                int(self.image_width * self.view_scale * ratio),
                int(self.painting.width * ratio),
            )
            height = max(scaled_height, self.painting.height)
        return width + _MARGIN, height + _MARGIN

    def frame_size(self) -> tuple[int, int] | None:
        """Size of the template outline, or None when no template is set."""
        if self.painting is None:
            return None
        return (
            int(self.painting.width * self.view_scale * self.painting.ratio),
            int(self.painting.height * self.view_scale),
        )