"""Unit tests for compiled artifact loading."""

import json
from pathlib import Path

import pytest

from tron_tornado_deployments.artifacts import load_artifact, parse_artifact
from tron_tornado_deployments.exceptions import ArtifactNotFoundError, InvalidArtifactError


class TestLoadArtifact:
    def test_loads_truffle_artifact(self, artifacts_dir: Path):
        artifact = load_artifact("ETHTornado", artifacts_dir)

        assert artifact.name == "ETHTornado"
        assert artifact.abi[0]["type"] == "constructor"

    def test_strips_0x_from_bytecode(self, artifacts_dir: Path):
        artifact = load_artifact("Hasher", artifacts_dir)

        assert artifact.bytecode == "608060405234"

    def test_missing_artifact_raises(self, artifacts_dir: Path):
        with pytest.raises(ArtifactNotFoundError) as exc_info:
            load_artifact("DoesNotExist", artifacts_dir)

        assert "DoesNotExist.json" in str(exc_info.value)

    def test_missing_artifact_is_file_not_found(self, artifacts_dir: Path):
        with pytest.raises(FileNotFoundError):
            load_artifact("DoesNotExist", artifacts_dir)


class TestParseArtifact:
    def test_name_falls_back_to_contract_name(self, artifacts_dir: Path):
        artifact = parse_artifact(artifacts_dir / "Verifier.json")

        assert artifact.name == "Verifier"

    def test_name_falls_back_to_file_stem(self, tmp_path: Path):
        path = tmp_path / "Hasher.json"
        path.write_text(json.dumps({"abi": [{"type": "fallback"}], "bytecode": "6080"}))

        artifact = parse_artifact(path)

        assert artifact.name == "Hasher"
        assert artifact.bytecode == "6080"

    def test_missing_bytecode_raises(self, tmp_path: Path):
        path = tmp_path / "Broken.json"
        path.write_text(json.dumps({"abi": [{"type": "fallback"}]}))

        with pytest.raises(InvalidArtifactError):
            parse_artifact(path)

    def test_missing_abi_raises(self, tmp_path: Path):
        path = tmp_path / "Broken.json"
        path.write_text(json.dumps({"bytecode": "0x6080"}))

        with pytest.raises(InvalidArtifactError):
            parse_artifact(path)
