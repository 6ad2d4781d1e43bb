"""Document envelope pairing a semantic tree with its view state.

This is the shape the persistence layer stores and loads verbatim.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from mindmap.models.semantic_tree import SemanticTree
from mindmap.models.view_state import ViewState


class StylePreset(str, Enum):
    """Tone the generator was asked to use."""

    study = "study"
    executive = "executive"
    legal = "legal"
    technical = "technical"


class SourceType(str, Enum):
    topic = "topic"
    text = "text"
    pdf = "pdf"


class _CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class PdfSource(_CamelModel):
    source_id: str
    type: Literal["pdf"] = "pdf"
    file_name: str
    storage_url: str
    page_count: int


class TextSource(_CamelModel):
    source_id: str
    type: Literal["text"] = "text"
    name: str
    char_count: int


class TopicSource(_CamelModel):
    source_id: str
    type: Literal["topic"] = "topic"
    query: str


Source = Annotated[PdfSource | TextSource | TopicSource, Field(discriminator="type")]


class DocumentMeta(_CamelModel):
    """Descriptive metadata of a mind map document."""

    title: str = Field(min_length=1, max_length=200)
    style_preset: StylePreset
    created_at: str  # ISO8601
    updated_at: str
    source_type: SourceType
    max_depth: int = Field(ge=1, le=10)
    max_nodes: int = Field(ge=5, le=200)


class MindMapDocument(_CamelModel):
    """A semantic tree, its view state, and where its content came from."""

    id: str
    version: Literal["1.0"] = "1.0"
    meta: DocumentMeta
    semantic: SemanticTree
    view: ViewState
    sources: list[Source] = []
