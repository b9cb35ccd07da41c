import re
from collections.abc import Iterable
from pathlib import PurePosixPath

from mr_review_engine.core.application.ports.file_classifier_port import FileClassifierPort

CODE_FILE_EXTENSIONS = frozenset(
    {
        # JavaScript / TypeScript
        ".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs",
        # Python
        ".py", ".pyw", ".pyi",
        # JVM
        ".java", ".kt", ".kts", ".scala", ".groovy",
        # C / C++
        ".c", ".cpp", ".cc", ".cxx", ".h", ".hpp", ".hxx",
        # .NET
        ".cs", ".vb",
        ".go", ".rs", ".rb", ".php", ".swift",
        # Shell
        ".sh", ".bash", ".zsh",
        # Config
        ".json", ".yaml", ".yml", ".toml", ".ini", ".conf",
        # Web
        ".html", ".css", ".scss", ".sass", ".less",
        ".sql", ".r", ".dart", ".lua", ".pl", ".pm",
    }
)

NON_CODE_PATTERNS = (
    re.compile(r"node_modules"),
    re.compile(r"/dist/"),
    re.compile(r"/build/"),
    re.compile(r"/\.git/"),
    re.compile(r"/\.vscode/"),
    re.compile(r"/\.idea/"),
    re.compile(r"\.min\.js$"),
    re.compile(r"\.lock$"),
    re.compile(r"\.map$"),
)


class ExtensionFileClassifier(FileClassifierPort):
    """Allowlist of source extensions minus vendored/build/minified paths."""

    def __init__(
        self,
        extensions: Iterable[str] = CODE_FILE_EXTENSIONS,
        excluded_patterns: Iterable[re.Pattern[str]] = NON_CODE_PATTERNS,
    ) -> None:
        self._extensions = frozenset(e.lower() for e in extensions)
        self._excluded = tuple(excluded_patterns)

    def is_code_file(self, path: str) -> bool:
        if not path:
            return False
        if any(p.search(path) for p in self._excluded):
            return False
        return PurePosixPath(path).suffix.lower() in self._extensions
