"""pyattributed - declarative composition of rich-text style attributes."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyattributed")
except PackageNotFoundError:
    __version__ = "0+local"
from pyattributed.attributes import (
    Alignment,
    Attribute,
    Background,
    BaselineOffset,
    BaseWritingDirection,
    Foreground,
    Hyphenation,
    Indent,
    Kern,
    LineBreakMode,
    LineHeight,
    LineHeightMultiple,
    LineSpacing,
    Link,
    Paragraph,
    ParagraphSpacing,
    Strikethrough,
    StrikethroughColor,
    SupportsAttributes,
    TabStops,
    TighteningForTruncation,
    Typeface,
    Underline,
    UnderlineColor,
)
from pyattributed.builder import AttributesBuilder, compose, compose_all
from pyattributed.composition import AttributesComposite, MergePolicy, merge_paragraph_styles
from pyattributed.config import ComposeConfig
from pyattributed.exceptions import AttributedConfigError, AttributedError
from pyattributed.keys import Attributes, StyleKey, StyleValue
from pyattributed.models import (
    Color,
    Font,
    LineBreak,
    ParagraphStyle,
    TabStop,
    TextAlignment,
    UnderlineStyle,
    WritingDirection,
)
from pyattributed.text import AttributedString, attributed

__all__ = [
    "__version__",
    "Alignment",
    "Attribute",
    "AttributedConfigError",
    "AttributedError",
    "AttributedString",
    "Attributes",
    "AttributesBuilder",
    "AttributesComposite",
    "Background",
    "BaseWritingDirection",
    "BaselineOffset",
    "Color",
    "ComposeConfig",
    "Font",
    "Foreground",
    "Hyphenation",
    "Indent",
    "Kern",
    "LineBreak",
    "LineBreakMode",
    "LineHeight",
    "LineHeightMultiple",
    "LineSpacing",
    "Link",
    "MergePolicy",
    "Paragraph",
    "ParagraphSpacing",
    "ParagraphStyle",
    "Strikethrough",
    "StrikethroughColor",
    "StyleKey",
    "StyleValue",
    "SupportsAttributes",
    "TabStop",
    "TabStops",
    "TextAlignment",
    "TighteningForTruncation",
    "Typeface",
    "Underline",
    "UnderlineColor",
    "UnderlineStyle",
    "WritingDirection",
    "attributed",
    "compose",
    "compose_all",
    "merge_paragraph_styles",
]
