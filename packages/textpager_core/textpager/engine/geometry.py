"""Page geometry and unit conversions used by the layout engine.

All layout coordinates are millimetres measured from the top-left corner
of the page; font sizes are points.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import GeometryError

MM_PER_POINT = 0.352778
POINTS_PER_MM = 2.834645669

# Average Helvetica advance width as a fraction of the font size.
AVG_CHAR_EM = 0.5


def mm_to_points(value: float) -> float:
    return value * POINTS_PER_MM


def points_to_mm(value: float) -> float:
    return value * MM_PER_POINT


def average_char_width_mm(font_size_pt: float, char_em: float = AVG_CHAR_EM) -> float:
    """Estimated width of one character at the given font size.

    No font metrics are consulted: every glyph is assumed to advance
    ``char_em`` of the em square.
    """
    return points_to_mm(font_size_pt * char_em)


@dataclass(slots=True, frozen=True)
class PageGeometry:
    """Fixed page geometry for one pagination run (A4 portrait by default)."""

    page_width_mm: float = 210.0
    page_height_mm: float = 297.0
    margin_mm: float = 20.0
    default_font_size_pt: float = 11.0
    line_height_mm: float = 6.0

    @property
    def content_width_mm(self) -> float:
        return self.page_width_mm - 2 * self.margin_mm

    @property
    def content_top_mm(self) -> float:
        return self.margin_mm

    @property
    def content_bottom_mm(self) -> float:
        """Lowest y at which a line may still start."""
        return self.page_height_mm - self.margin_mm

    @property
    def avg_char_width_mm(self) -> float:
        """Average character width of body text."""
        return average_char_width_mm(self.default_font_size_pt)

    @property
    def page_size_points(self) -> tuple[float, float]:
        return mm_to_points(self.page_width_mm), mm_to_points(self.page_height_mm)

    def validate(self) -> "PageGeometry":
        """Reject geometries that leave no content area.

        Returns:
            The geometry itself, so calls can be chained.

        Raises:
            GeometryError: If margins swallow the page or sizes are not positive.
        """
        details = {
            'page_width_mm': self.page_width_mm,
            'page_height_mm': self.page_height_mm,
            'margin_mm': self.margin_mm,
        }
        if self.margin_mm <= 0:
            raise GeometryError(f"Margin must be positive, got {self.margin_mm}", details=details)
        if self.page_width_mm <= 2 * self.margin_mm:
            raise GeometryError(
                f"Page width {self.page_width_mm}mm leaves no content width with {self.margin_mm}mm margins",
                details=details,
            )
        if self.page_height_mm <= 2 * self.margin_mm:
            raise GeometryError(
                f"Page height {self.page_height_mm}mm leaves no content height with {self.margin_mm}mm margins",
                details=details,
            )
        if self.line_height_mm <= 0:
            raise GeometryError(f"Line height must be positive, got {self.line_height_mm}", details=details)
        if self.default_font_size_pt <= 0:
            raise GeometryError(f"Font size must be positive, got {self.default_font_size_pt}", details=details)
        return self
