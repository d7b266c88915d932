import json

import pytest

from seed_deploy.report import NEXT_STEPS, DeploymentSummary, publish_summary
from seed_deploy.settings import DeploySettings, OutputFormat


@pytest.fixture
def sample_summary() -> DeploymentSummary:
    """Provides a sample DeploymentSummary for testing."""
    return DeploymentSummary(
        chain_id=42220,
        deployer="0x1234567890123456789012345678901234567890",
        strategy="0x5555555555555555555555555555555555555555",
        implementation="0x6666666666666666666666666666666666666666",
        vault="0x7777777777777777777777777777777777777777",
        verifier="0xabcdefabcdefabcdefabcdefabcdefabcdefabcd",
        vault_authorized_on_verifier=True,
        executed_steps=["connect", "load_config", "summarize"],
        skipped_steps=["set_rebalancer"],
    )


def test_publish_json_prints_summary(capsys, sample_summary):
    settings = DeploySettings(output_format=OutputFormat.JSON)

    publish_summary(settings, sample_summary)

    data = json.loads(capsys.readouterr().out)
    assert data["vault"] == sample_summary.vault
    assert data["chain_id"] == 42220
    assert data["rebalancer"] is None
    assert data["skipped_steps"] == ["set_rebalancer"]
    assert data["next_steps"] == list(NEXT_STEPS)


def test_publish_table_prints_panels(capsys, sample_summary):
    settings = DeploySettings(output_format=OutputFormat.TABLE)

    publish_summary(settings, sample_summary)

    out = capsys.readouterr().out
    assert "Deployment Complete" in out
    assert "Next Steps" in out
    assert sample_summary.vault in out


def test_publish_writes_summary_file(tmp_path, capsys, sample_summary):
    summary_file = tmp_path / "out" / "deployment.json"
    settings = DeploySettings(
        output_format=OutputFormat.JSON, summary_file=summary_file
    )

    publish_summary(settings, sample_summary)

    written = json.loads(summary_file.read_text())
    printed = json.loads(capsys.readouterr().out)
    assert written == printed
    assert written["strategy"] == sample_summary.strategy
