import pytest

from backupbuddy.errors import ResolutionError
from backupbuddy.registry import JobRegistry
from backupbuddy.resolver import YamlJobResolver
from backupbuddy.security import EncryptionTool

CONFIG = """
extension: tgz
jobs:
  - trigger: nightly
    label: Nightly home backup
    paths: [~/Documents, ~/Pictures]
    excludes: ["*.tmp"]
    compress: true
    encryption: gpg
    recipient: backup@example.com
    keep: 3
  - trigger: photos
    paths: /srv/photos
    extension: tar
"""


def test_resolve_returns_matching_job(write_config):
    config_source = write_config(CONFIG)
    registry = JobRegistry()

    job = YamlJobResolver().resolve("nightly", config_source, registry)

    assert job.label == "Nightly home backup"
    assert job.paths == ["~/Documents", "~/Pictures"]
    assert job.excludes == ["*.tmp"]
    assert job.compress == True
    assert job.encryption is EncryptionTool.GPG
    assert job.recipient == "backup@example.com"
    assert job.keep == 3
    assert job.extension == "tgz"


def test_resolve_registers_every_definition(write_config):
    registry = JobRegistry()

    job = YamlJobResolver().resolve("photos", write_config(CONFIG), registry)

    assert [j.trigger for j in registry.jobs] == ["nightly", "photos"]
    assert registry.current is job
    assert registry.extension == "tgz"
    assert job.label == "photos"
    assert job.paths == ["/srv/photos"]
    assert job.extension == "tar"


def test_unknown_trigger(write_config):
    with pytest.raises(ResolutionError, match="Available triggers: nightly, photos"):
        YamlJobResolver().resolve("missing", write_config(CONFIG), JobRegistry())


def test_ambiguous_trigger(write_config):
    config_source = write_config("jobs:\n  - {trigger: a, paths: [x]}\n  - {trigger: a, paths: [y]}\n")

    with pytest.raises(ResolutionError, match="defined 2 times"):
        YamlJobResolver().resolve("a", config_source, JobRegistry())


def test_missing_config_file(tmp_path):
    with pytest.raises(ResolutionError, match="not found"):
        YamlJobResolver().resolve("a", tmp_path / "nope.yaml", JobRegistry())


def test_invalid_yaml(write_config):
    with pytest.raises(ResolutionError, match="not valid YAML"):
        YamlJobResolver().resolve("a", write_config("jobs: [unclosed"), JobRegistry())


@pytest.mark.parametrize("text", [
    "",
    "jobs: nightly",
    "jobs:\n  - paths: [x]\n",
    "jobs:\n  - trigger: a\n",
    "jobs:\n  - {trigger: a, paths: [x], encryption: rot13}\n",
    "jobs:\n  - {trigger: a, paths: [x], keep: -1}\n",
    "jobs:\n  - {trigger: a, paths: [x], keep: true}\n",
    "jobs:\n  - {trigger: a, paths: [x], excludes: {tmp: true}}\n",
])
def test_malformed_definitions(write_config, text):
    with pytest.raises(ResolutionError):
        YamlJobResolver().resolve("a", write_config(text), JobRegistry())


def test_config_that_is_not_utf8(tmp_path):
    config_source = tmp_path / "latin1.yaml"
    config_source.write_bytes(b"jobs:\n  - {trigger: a, paths: [x]}\n# \xff\xfe\n")

    with pytest.raises(ResolutionError, match="not valid UTF-8"):
        YamlJobResolver().resolve("a", config_source, JobRegistry())


def test_single_exclude_pattern_as_string(write_config):
    config_source = write_config("jobs:\n  - {trigger: a, paths: [x], excludes: '*.tmp'}\n")

    job = YamlJobResolver().resolve("a", config_source, JobRegistry())

    assert job.excludes == ["*.tmp"]
