from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Union

# ---- Aliases for clarity ----
GroupPolicy = Literal["never", "newLine", "emptyLine"]
IndentCfg = Union[int, Literal["tab"]]
LiteralKind = Literal["string", "template"]

DEFAULT_CLASS_ATTRIBUTES: List[str] = ["class", "className"]
DEFAULT_CALLEES: List[str] = [
    "cc", "clb", "clsx", "cn", "cnb", "ctl", "cva", "cx",
    "dcnb", "objstr", "tv", "twJoin", "twMerge",
]


# -----------------------------
@dataclass(frozen=True)
class MultilineOptions:
    enabled: bool = True
    print_width: int = 80
    classes_per_line: int = 100_000  # effectively unbounded
    indent: IndentCfg = 4
    group: GroupPolicy = "emptyLine"

    def __post_init__(self):
        if self.print_width < 1:
            raise ValueError(f"print_width must be positive, got {self.print_width}")
        if self.classes_per_line < 1:
            raise ValueError(f"classes_per_line must be positive, got {self.classes_per_line}")
        if self.indent != "tab" and self.indent < 0:
            raise ValueError(f"indent must be 'tab' or a non-negative integer, got {self.indent}")

    @property
    def indent_width(self) -> int:
        """Number of indentation units one level adds."""
        return 1 if self.indent == "tab" else int(self.indent)

    @property
    def indent_char(self) -> str:
        return "\t" if self.indent == "tab" else " "


@dataclass(frozen=True)
class WhitespaceOptions:
    enabled: bool = True
    allow_multiline: bool = True


@dataclass(frozen=True)
class TwlintConfig:
    extensions: List[str] = field(default_factory=lambda: [".tsx", ".jsx", ".ts", ".js"])
    exclude: List[str] = field(default_factory=lambda: ["node_modules/", "dist/", "build/"])
    class_attributes: List[str] = field(default_factory=lambda: list(DEFAULT_CLASS_ATTRIBUTES))
    callees: List[str] = field(default_factory=lambda: list(DEFAULT_CALLEES))
    multiline: MultilineOptions = field(default_factory=MultilineOptions)
    whitespace: WhitespaceOptions = field(default_factory=WhitespaceOptions)


# ---- Literal boundaries ----

@dataclass(frozen=True)
class BoundaryMeta:
    """
    Delimiters surrounding the class text of one literal.

    start_column is the indentation (in indent units) of the content lines
    of a multi-line layout.
    """
    start_column: int = 0
    opening_quote: Optional[str] = None
    closing_quote: Optional[str] = None
    closing_braces: Optional[str] = None  # end of a preceding ${...}
    opening_braces: Optional[str] = None  # start of a following ${...}

    @property
    def has_braces(self) -> bool:
        return self.opening_braces is not None or self.closing_braces is not None


@dataclass(frozen=True)
class ClassLiteral:
    """
    One literal holding class names, as found in source text.

    For template literals every static segment between substitutions is a
    separate ClassLiteral; raw then includes the backtick or brace markers
    that frame the segment.
    """
    kind: LiteralKind
    content: str
    raw: str
    start_char: int
    end_char: int
    anchor_indent: int = 0  # leading whitespace width of the anchor line
    opening_quote: Optional[str] = None
    closing_quote: Optional[str] = None
    closing_braces: Optional[str] = None
    opening_braces: Optional[str] = None
    attribute_name: Optional[str] = None  # set for plain JSX attribute values

    @property
    def has_braces(self) -> bool:
        return self.opening_braces is not None or self.closing_braces is not None

    @property
    def content_offset(self) -> int:
        """Offset of content inside raw."""
        if self.kind == "string":
            return len(self.opening_quote or "")
        return len(self.opening_quote or self.closing_braces or "")
