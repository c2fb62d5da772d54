"""Model for font colors as reported by a host spreadsheet."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import COLORS


class ColorKind(str, Enum):
    """How a host describes a font color."""

    RGB = "rgb"
    NAMED = "named"


class ColorDescriptor(BaseModel):
    """A font color as an RGB hex string or a color keyword."""

    model_config = ConfigDict(frozen=True)

    kind: ColorKind = Field(..., description="Descriptor kind")
    value: str = Field(..., description="Hex string for RGB, keyword for named colors")

    @classmethod
    def rgb(cls, hex_string: str) -> "ColorDescriptor":
        return cls(kind=ColorKind.RGB, value=hex_string)

    @classmethod
    def named(cls, name: str) -> "ColorDescriptor":
        return cls(kind=ColorKind.NAMED, value=name)

    @classmethod
    def parse(cls, raw: "str | ColorDescriptor") -> "ColorDescriptor":
        """Build a descriptor from a host color string.

        ``#rrggbb`` is an RGB color, ``named:<keyword>`` or any other string is
        a named color. Descriptors are returned unchanged.
        """
        if isinstance(raw, ColorDescriptor):
            return raw
        if raw.startswith("#"):
            return cls.rgb(raw)
        if raw.startswith(COLORS.NAMED_PREFIX):
            return cls.named(raw[len(COLORS.NAMED_PREFIX) :])
        return cls.named(raw)

    @property
    def is_rgb(self) -> bool:
        return self.kind is ColorKind.RGB
