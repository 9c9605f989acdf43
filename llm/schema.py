import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from llm.errors import InvalidImageError
from llm.settings import Profile

_DATA_URI_RE = re.compile(r"^data:(.+);base64,(.+)$")


class _Request(BaseModel):
    profile: Profile = Field(default=Profile.FAST, description="Fast or thorough (deep reasoning)")


class DescriptionRequest(_Request):
    """A plain-text description of the figure to draw."""
    kind: Literal["description"] = "description"
    description: str = Field(description="Problem statement or figure description")


class ImageRequest(_Request):
    """An uploaded image, split out of its data URI."""
    kind: Literal["image"] = "image"
    mime_type: str = Field(description="MIME type, e.g. image/png")
    data: str = Field(description="Base64 payload")

    @classmethod
    def from_data_uri(cls, uri: str, profile: Profile = Profile.FAST) -> "ImageRequest":
        match = _DATA_URI_RE.match(uri or "")
        if not match:
            raise InvalidImageError("Invalid image: expected a data:<mime>;base64,<payload> URI.")
        return cls(mime_type=match.group(1), data=match.group(2), profile=profile)

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


class TikzRequest(_Request):
    """TikZ source to render as SVG."""
    kind: Literal["tikz"] = "tikz"
    tikz: str = Field(description="TikZ source code")


GenerationRequest = Annotated[
    Union[DescriptionRequest, ImageRequest, TikzRequest],
    Field(discriminator="kind"),
]

__all__ = ["DescriptionRequest", "ImageRequest", "TikzRequest", "GenerationRequest"]
