"""Built-in language table."""

from __future__ import annotations

from typing import Tuple

from .base import LanguageDefinition

_C_BLOCK: Tuple[Tuple[str, str], ...] = (("/*", "*/"),)
_XML_BLOCK: Tuple[Tuple[str, str], ...] = (("<!--", "-->"),)
_DOUBLE: Tuple[Tuple[str, str], ...] = (('"', '"'),)
_DOUBLE_SINGLE: Tuple[Tuple[str, str], ...] = (('"', '"'), ("'", "'"))
_JS_QUOTES: Tuple[Tuple[str, str], ...] = (('"', '"'), ("'", "'"), ("`", "`"))
_TRIPLE_DOUBLE: Tuple[Tuple[str, str], ...] = (('"""', '"""'),)
_TRIPLE_BOTH: Tuple[Tuple[str, str], ...] = (('"""', '"""'), ("'''", "'''"))


def _c_style(name: str, extensions: Tuple[str, ...], **kwargs: object) -> LanguageDefinition:
    params: dict = {
        "line_comments": ("//",),
        "block_comments": _C_BLOCK,
        "quotes": _DOUBLE,
    }
    params.update(kwargs)
    return LanguageDefinition(name=name, extensions=extensions, **params)


def _hash_style(name: str, extensions: Tuple[str, ...], **kwargs: object) -> LanguageDefinition:
    params: dict = {
        "line_comments": ("#",),
        "quotes": _DOUBLE_SINGLE,
    }
    params.update(kwargs)
    return LanguageDefinition(name=name, extensions=extensions, **params)


BUILTIN_LANGUAGES: Tuple[LanguageDefinition, ...] = (
    LanguageDefinition(
        name="Assembly",
        extensions=("asm",),
        line_comments=(";",),
        quotes=_DOUBLE,
    ),
    _hash_style("Bash", ("bash",), filenames=(".bashrc", ".bash_profile")),
    LanguageDefinition(
        name="Batch",
        extensions=("bat", "btm", "cmd"),
        line_comments=("::",),
        comment_keywords=("rem", "@rem"),
    ),
    _c_style("C", ("c", "ec", "pgc")),
    _c_style("CHeader", ("h",)),
    _hash_style("CMake", ("cmake",), filenames=("cmakelists.txt",), quotes=_DOUBLE),
    _c_style("CSharp", ("cs", "csx")),
    LanguageDefinition(
        name="Css",
        extensions=("css",),
        block_comments=_C_BLOCK,
        quotes=_DOUBLE_SINGLE,
    ),
    _c_style("Cpp", ("cc", "cpp", "cxx", "c++", "pcc", "tpp")),
    _c_style("CppHeader", ("hh", "hpp", "hxx", "inl", "ipp")),
    _c_style(
        "Dart",
        ("dart",),
        nested=True,
        quotes=_DOUBLE_SINGLE,
        doc_quotes=_TRIPLE_BOTH,
    ),
    _hash_style("Dockerfile", ("dockerfile",), filenames=("dockerfile", "containerfile")),
    _hash_style("Elixir", ("ex", "exs"), quotes=_DOUBLE, doc_quotes=_TRIPLE_DOUBLE),
    LanguageDefinition(
        name="Erlang",
        extensions=("erl", "hrl"),
        line_comments=("%",),
        quotes=_DOUBLE,
    ),
    _c_style("Go", ("go",), quotes=(('"', '"'), ("`", "`"))),
    _c_style("Groovy", ("groovy", "gradle"), quotes=_DOUBLE_SINGLE, doc_quotes=_TRIPLE_BOTH),
    LanguageDefinition(
        name="Haskell",
        extensions=("hs",),
        line_comments=("--",),
        block_comments=(("{-", "-}"),),
        nested=True,
        quotes=_DOUBLE,
    ),
    LanguageDefinition(
        name="Html",
        extensions=("html", "htm"),
        block_comments=_XML_BLOCK,
        quotes=_DOUBLE,
    ),
    LanguageDefinition(
        name="Ini",
        extensions=("ini",),
        line_comments=(";", "#"),
    ),
    _c_style("Java", ("java",)),
    _c_style("JavaScript", ("cjs", "js", "mjs"), quotes=_JS_QUOTES),
    LanguageDefinition(name="Json", extensions=("json",)),
    _c_style("Jsx", ("jsx",), quotes=_JS_QUOTES),
    LanguageDefinition(
        name="Julia",
        extensions=("jl",),
        line_comments=("#",),
        block_comments=(("#=", "=#"),),
        nested=True,
        quotes=_DOUBLE,
        doc_quotes=_TRIPLE_DOUBLE,
    ),
    _c_style("Kotlin", ("kt", "kts"), nested=True, doc_quotes=_TRIPLE_DOUBLE),
    LanguageDefinition(
        name="Lua",
        extensions=("lua",),
        line_comments=("--",),
        block_comments=(("--[[", "]]"),),
        quotes=_DOUBLE_SINGLE,
    ),
    _hash_style(
        "Makefile",
        ("mak", "mk"),
        filenames=("makefile", "gnumakefile"),
        quotes=(),
    ),
    LanguageDefinition(
        name="Markdown",
        extensions=("md", "markdown"),
        literate=True,
    ),
    _c_style("ObjectiveC", ("m",)),
    _c_style("ObjectiveCpp", ("mm",)),
    _hash_style("Perl", ("pl", "pm"), block_comments=(("=pod", "=cut"),)),
    _c_style(
        "Php",
        ("php",),
        line_comments=("#", "//"),
        quotes=_DOUBLE_SINGLE,
    ),
    _hash_style("PowerShell", ("ps1", "psm1", "psd1"), block_comments=(("<#", "#>"),)),
    _c_style("Protobuf", ("proto",), block_comments=()),
    _hash_style("Python", ("py", "pyi", "pyw"), doc_quotes=_TRIPLE_BOTH),
    _hash_style("R", ("r",)),
    _hash_style(
        "Ruby",
        ("rb",),
        filenames=("rakefile", "gemfile"),
        block_comments=(("=begin", "=end"),),
    ),
    _c_style("Rust", ("rs",), nested=True),
    _c_style("Sass", ("sass", "scss"), quotes=_DOUBLE_SINGLE),
    _c_style("Scala", ("sc", "scala"), doc_quotes=_TRIPLE_DOUBLE),
    _hash_style("Sh", ("sh",)),
    LanguageDefinition(
        name="Sql",
        extensions=("sql",),
        line_comments=("--",),
        block_comments=_C_BLOCK,
        quotes=(("'", "'"),),
    ),
    _c_style("Swift", ("swift",), nested=True, doc_quotes=_TRIPLE_DOUBLE),
    LanguageDefinition(
        name="Tex",
        extensions=("tex", "sty", "cls"),
        line_comments=("%",),
    ),
    LanguageDefinition(
        name="Text",
        extensions=("text", "txt"),
        literate=True,
    ),
    _hash_style("Toml", ("toml",), doc_quotes=_TRIPLE_BOTH),
    _c_style("Tsx", ("tsx",), quotes=_JS_QUOTES),
    _c_style("TypeScript", ("cts", "mts", "ts"), quotes=_JS_QUOTES),
    LanguageDefinition(
        name="Xml",
        extensions=("xml", "xsd", "xsl"),
        block_comments=_XML_BLOCK,
        quotes=_DOUBLE,
    ),
    _hash_style("Yaml", ("yaml", "yml")),
    _c_style("Zig", ("zig",), block_comments=()),
    _hash_style("Zsh", ("zsh",), filenames=(".zshrc",)),
)


__all__ = ["BUILTIN_LANGUAGES"]
