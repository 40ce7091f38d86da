from pathlib import Path

FIXTURE_DIR = Path(__file__).resolve().parents[1] / "fixture"


def read_fixture(name: str) -> str:
    with (FIXTURE_DIR / name).open("r", encoding="utf-8", newline="") as f:
        return f.read()
