# topmark:header:start
#
#   project      : StdHeader
#   file         : builtins.py
#   file_relpath : src/stdheader/filetypes/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""Built-in file types, grouped by comment style.

Exports:
    FILETYPES: Concrete definitions, checked in order by
        `stdheader.filetypes.instances.resolve_filetype`.
"""

from __future__ import annotations

from stdheader.filetypes.base import FileType

# C family block comments
_C_BLOCK = "/* %s */"
_LINE_SLASH = "// %s"
_LINE_POUND = "# %s"
_LINE_DASH = "-- %s"
_XML = "<!-- %s -->"

FILETYPES: list[FileType] = [
    FileType(
        name="c",
        extensions=[".c", ".h"],
        filenames=[],
        patterns=[],
        comment_string=_C_BLOCK,
        description="C sources and headers (*.c, *.h)",
    ),
    FileType(
        name="cpp",
        extensions=[".cpp", ".cc", ".cxx", ".hpp", ".hh", ".hxx", ".tpp", ".ipp"],
        filenames=[],
        patterns=[],
        comment_string=_C_BLOCK,
        description="C++ sources, headers and templates",
    ),
    FileType(
        name="css",
        extensions=[".css", ".scss", ".less"],
        filenames=[],
        patterns=[],
        comment_string=_C_BLOCK,
        description="Stylesheets (*.css, *.scss, *.less)",
    ),
    FileType(
        name="java",
        extensions=[".java", ".kt", ".kts", ".scala"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_SLASH,
        description="JVM languages (*.java, *.kt, *.scala)",
    ),
    FileType(
        name="javascript",
        extensions=[".js", ".mjs", ".cjs", ".jsx"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_SLASH,
        description="JavaScript sources (*.js, *.mjs, *.cjs, *.jsx)",
    ),
    FileType(
        name="typescript",
        extensions=[".ts", ".tsx"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_SLASH,
        description="TypeScript sources (*.ts, *.tsx)",
    ),
    FileType(
        name="go",
        extensions=[".go"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_SLASH,
        description="Go sources (*.go)",
    ),
    FileType(
        name="rust",
        extensions=[".rs"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_SLASH,
        description="Rust sources (*.rs)",
    ),
    FileType(
        name="swift",
        extensions=[".swift"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_SLASH,
        description="Swift sources (*.swift)",
    ),
    FileType(
        name="python",
        extensions=[".py", ".pyi"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_POUND,
        description="Python sources and stubs (*.py, *.pyi)",
    ),
    FileType(
        name="shell",
        extensions=[".sh", ".bash", ".zsh"],
        filenames=[".bashrc", ".zshrc", ".profile"],
        patterns=[],
        comment_string=_LINE_POUND,
        description="Shell scripts (*.sh, *.bash, *.zsh)",
    ),
    FileType(
        name="makefile",
        extensions=[".mk"],
        filenames=["Makefile", "makefile", "GNUmakefile"],
        patterns=[],
        comment_string=_LINE_POUND,
        description="Make build scripts (Makefile, *.mk)",
    ),
    FileType(
        name="cmake",
        extensions=[".cmake"],
        filenames=["CMakeLists.txt"],
        patterns=[],
        comment_string=_LINE_POUND,
        description="CMake scripts (CMakeLists.txt, *.cmake)",
    ),
    FileType(
        name="dockerfile",
        extensions=[],
        filenames=["Dockerfile"],
        patterns=[r"Dockerfile\..+", r".+\.Dockerfile"],
        comment_string=_LINE_POUND,
        description="Dockerfiles",
    ),
    FileType(
        name="perl",
        extensions=[".pl", ".pm"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_POUND,
        description="Perl scripts and modules (*.pl, *.pm)",
    ),
    FileType(
        name="ruby",
        extensions=[".rb"],
        filenames=["Rakefile", "Gemfile"],
        patterns=[],
        comment_string=_LINE_POUND,
        description="Ruby sources (*.rb)",
    ),
    FileType(
        name="toml",
        extensions=[".toml"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_POUND,
        description="TOML documents (*.toml)",
    ),
    FileType(
        name="yaml",
        extensions=[".yaml", ".yml"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_POUND,
        description="YAML documents (*.yaml, *.yml)",
    ),
    FileType(
        name="lua",
        extensions=[".lua"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_DASH,
        description="Lua sources (*.lua)",
    ),
    FileType(
        name="sql",
        extensions=[".sql"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_DASH,
        description="SQL scripts (*.sql)",
    ),
    FileType(
        name="haskell",
        extensions=[".hs"],
        filenames=[],
        patterns=[],
        comment_string=_LINE_DASH,
        description="Haskell sources (*.hs)",
    ),
    FileType(
        name="html",
        extensions=[".html", ".htm", ".xhtml"],
        filenames=[],
        patterns=[],
        comment_string=_XML,
        description="HTML documents (*.html, *.htm)",
    ),
    FileType(
        name="xml",
        extensions=[".xml", ".svg", ".xsd", ".xsl"],
        filenames=[],
        patterns=[],
        comment_string=_XML,
        description="XML documents (*.xml, *.svg, *.xsd, *.xsl)",
    ),
    FileType(
        name="markdown",
        extensions=[".md", ".markdown"],
        filenames=[],
        patterns=[],
        comment_string=_XML,
        description="Markdown documents (*.md)",
    ),
    FileType(
        name="vim",
        extensions=[".vim"],
        filenames=[".vimrc"],
        patterns=[],
        comment_string='" %s',
        description="Vim scripts (*.vim, .vimrc)",
    ),
    FileType(
        name="lisp",
        extensions=[".el", ".lisp", ".cl", ".scm"],
        filenames=[],
        patterns=[],
        comment_string=";; %s",
        description="Lisp dialects (*.el, *.lisp, *.scm)",
    ),
    FileType(
        name="latex",
        extensions=[".tex", ".sty", ".cls"],
        filenames=[],
        patterns=[],
        comment_string="%% %s",
        description="LaTeX documents (*.tex, *.sty, *.cls)",
    ),
]
