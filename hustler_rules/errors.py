from pathlib import Path


class RulesProvisionError(Exception):
    """Base user-facing application error."""


class RuleFileError(RulesProvisionError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class FrontmatterParseError(RuleFileError):
    def __init__(self, path: Path, detail: str, preview: list[str]) -> None:
        self.detail = detail
        self.preview = preview
        super().__init__(path=path, message=f"Invalid front matter ({detail})")
