from src.docref.domain.entities import EditPolicy


def keep_policy(url: str, mime: str, absolute: bool) -> None:
    return None


def identity_policy(url: str, mime: str, absolute: bool) -> str:
    return url


def rebase_policy(base_url: str) -> EditPolicy:
    """Move relative references under ``base_url``; absolute ones are left alone."""
    base = base_url.rstrip("/")

    def edit(url: str, mime: str, absolute: bool) -> str | None:
        if absolute or not base:
            return None
        return f"{base}/{url.lstrip('/')}"

    return edit
