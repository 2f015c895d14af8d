import re
from typing import Final


GEMFILE_LOCK: Final[str] = "Gemfile.lock"
DATABASE_CONFIG: Final[str] = "config/database.yml"
IMPORTMAP_CONFIG: Final[str] = "config/importmap.rb"
VIEWS_DIRNAME: Final[str] = "app/views"
VIEW_PATTERNS: Final[tuple[str, ...]] = ("*.html.erb", "*.html")

RULES_SOURCE_DIRNAME: Final[str] = "assets/rules"
EXAMPLES_DIRNAME: Final[str] = "views/examples"
RULES_DEST_DIRNAME: Final[str] = ".claude/rules/hustler-rails"
RULE_SUFFIX: Final[str] = ".md"
README_FILENAME: Final[str] = "README.md"

LOCK_INDENT: Final[str] = "    "
ADAPTER_RE: Final[re.Pattern[str]] = re.compile(r"adapter:\s*(\w+)")
IMPORTMAP_PIN_RE: Final[re.Pattern[str]] = re.compile(r"""pin ["']([^"']+)""")
CDN_LIBRARY_RE: Final[re.Pattern[str]] = re.compile(
    r"""(?:unpkg\.com|cdn\.jsdelivr\.net/npm|cdnjs\.cloudflare\.com/ajax/libs)/([^@/\s"']+)"""
)

# (substring of the raw adapter, canonical gem name)
ADAPTER_ALIASES: Final[tuple[tuple[str, str], ...]] = (
    ("sqlite", "sqlite3"),
    ("pg", "postgresql"),
    ("mysql", "mysql2"),
)

FRONTMATTER_PREVIEW_LINES: Final[int] = 3
