"""Tests for the command-line entry point."""
import json

import pytest
import yaml

from main import main


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, temp_dir):
    """Run from a directory without config.yaml and without W&B variables."""
    for name in ("WANDB_MODE", "WANDB_PROJECT", "WANDB_ENTITY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(temp_dir)


class TestCheckCommand:
    """Test cases for ``main.py check``."""

    def test_clean_docs(self, docs_tree, capsys):
        assert main(["check", "--docs-dir", str(docs_tree)]) == 0

        out = capsys.readouterr().out
        assert "Checked 3 document(s): 0 error(s), 0 warning(s)" in out

    def test_broken_link_fails(self, docs_tree, write_doc, capsys):
        write_doc(docs_tree / "three.md", "# Three\n\n[gone](gone.md)\n")

        assert main(["check", "--docs-dir", str(docs_tree)]) == 1

        out = capsys.readouterr().out
        assert "three.md:3: error: [broken_link]" in out

    def test_json_report(self, docs_tree, write_doc, capsys):
        write_doc(docs_tree / "three.md", "# Three\n\n![gone](gone.png)\n")

        assert main(["check", "--docs-dir", str(docs_tree), "--format", "json"]) == 1

        report = json.loads(capsys.readouterr().out)
        assert report['documents_checked'] == 4
        assert report['ok'] is False
        assert report['error_count'] == 1
        assert report['issues'][0]['kind'] == "missing_image"

    def test_strict_fails_on_warnings(self, docs_tree, write_doc):
        write_doc(docs_tree / "three.md", "# Three\n\n[nowhere](#nowhere)\n")

        assert main(["check", "--docs-dir", str(docs_tree)]) == 0
        assert main(["check", "--docs-dir", str(docs_tree), "--strict"]) == 1

    def test_docs_root_relative_to_config(self, docs_tree, temp_dir, monkeypatch):
        config = temp_dir / "project.yaml"
        config.write_text(yaml.safe_dump({'docs': {'root': "docs", 'first_article': "index.md"}}), encoding="utf-8")
        elsewhere = temp_dir / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)

        assert main(["check", "--config", str(config), "--strict"]) == 0

    def test_unbuildable_yaml_is_an_issue(self, docs_tree, write_doc, capsys):
        write_doc(docs_tree / "three.md", "# Three\n\n```yaml\ncreated: 2020-13-45\n```\n")

        assert main(["check", "--docs-dir", str(docs_tree)]) == 1

        assert "three.md:3: error: [invalid_code] yaml block: invalid YAML" in capsys.readouterr().out

    def test_missing_docs_dir(self, temp_dir, capsys):
        assert main(["check", "--docs-dir", str(temp_dir / "nope")]) == 2

        assert "error:" in capsys.readouterr().err


class TestConfigCommand:
    """Test cases for ``main.py config``."""

    def test_flags_override_defaults(self, capsys):
        assert main(["config", "--epochs", "5", "--wandb-mode", "offline", "--wandb-tags", "a", "b"]) == 0

        printed = yaml.safe_load(capsys.readouterr().out)
        assert printed['training']['epochs'] == 5
        assert printed['tracking']['mode'] == "offline"
        assert printed['tracking']['tags'] == ["a", "b"]
        assert printed['docs']['root'] == "docs"

    def test_environment_overrides_file(self, temp_dir, monkeypatch, capsys):
        config = temp_dir / "config.yaml"
        config.write_text(yaml.safe_dump({'tracking': {'mode': "online", 'project': "from-file"}}), encoding="utf-8")
        monkeypatch.setenv("WANDB_MODE", "offline")

        assert main(["config"]) == 0

        printed = yaml.safe_load(capsys.readouterr().out)
        assert printed['tracking']['mode'] == "offline"
        assert printed['tracking']['project'] == "from-file"

    def test_missing_explicit_config(self, capsys):
        assert main(["config", "--config", "missing.yaml"]) == 2

        assert "missing.yaml" in capsys.readouterr().err

    def test_null_tracking_interval_is_a_config_error(self, temp_dir, capsys):
        (temp_dir / "config.yaml").write_text("tracking:\n  log_every_n_steps: null\n", encoding="utf-8")

        assert main(["config"]) == 2

        assert "error: Invalid numeric value in tracking configuration" in capsys.readouterr().err

    def test_invalid_override(self, capsys):
        assert main(["config", "--batch-size", "0"]) == 2

        assert "batch_size" in capsys.readouterr().err

    def test_bad_flag_type_exits(self):
        with pytest.raises(SystemExit):
            main(["config", "--epochs", "many"])


class TestTrainCommand:
    """Test cases for ``main.py train``."""

    def test_small_run(self, capsys):
        code = main(["train", "--epochs", "1", "--num-samples", "20", "--batch-size", "8"])

        assert code == 0
        out = capsys.readouterr().out
        assert "Training complete." in out
        assert "Total steps: 2" in out
