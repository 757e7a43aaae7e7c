from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def config_dir(tmp_path: Path) -> Path:
    """Minimal configuration directory mirroring referee/config/."""

    directory = tmp_path / "config"
    directory.mkdir()
    (directory / "settings.yaml").write_text(
        "app: {name: referee-test, version: '0.0.1'}\n"
        "logging: {level: WARNING, format: json}\n"
        "output: {score_precision: 3, show_pros_cons: false}\n",
        encoding="utf-8",
    )
    (directory / "presets.yaml").write_text(
        "presets:\n"
        "  api-comparison:\n"
        "    category: api\n"
        "    items: [REST, GraphQL, gRPC]\n"
        "    weights: {performance: 3, ease_of_use: 1}\n"
        "    constraints: {performance: high}\n"
        "  broken:\n"
        "    category: api\n"
        "    items: []\n",
        encoding="utf-8",
    )
    return directory
