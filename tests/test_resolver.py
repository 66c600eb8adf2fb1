from __future__ import annotations

from pathlib import Path

import pytest

from gssh.core.errors import ConfigReadError, ValidationError
from gssh.core.profile import HostProfile, ProfileLayer
from gssh.core.resolver import ProfileResolver, env_key, read_env, resolve_profile

NO_FLAGS = {"host": None, "user": None, "port": None, "identity": None}


def _profile(directory: Path, name: str, text: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_env_key_normalizes_name() -> None:
    assert env_key("host") == "GSSH_HOST"
    assert env_key("dry-run") == "GSSH_DRY_RUN"


def test_read_env_treats_empty_as_unset() -> None:
    assert read_env("host", {"GSSH_HOST": ""}) is None
    assert read_env("host", {"GSSH_HOST": "box"}) == "box"
    assert read_env("host", {}) is None


# (file, env, flags, expected host, expected user, expected port)
PRECEDENCE_CASES = [
    ({}, {}, {"host": "f"}, "f", "", 22),
    ({"host": "file"}, {}, {}, "file", "", 22),
    ({"host": "file"}, {"GSSH_HOST": "env"}, {}, "env", "", 22),
    ({"host": "file"}, {"GSSH_HOST": "env"}, {"host": "flag"}, "flag", "", 22),
    ({"host": "file", "user": "fu"}, {"GSSH_HOST": "env"}, {}, "env", "fu", 22),
    ({"host": "h", "port": 2200}, {"GSSH_PORT": "2300"}, {}, "h", "", 2300),
    ({"host": "h", "port": 2200}, {"GSSH_PORT": "2300"}, {"port": 2400}, "h", "", 2400),
    ({"host": "h", "port": 2200}, {}, {"port": 22}, "h", "", 22),
    ({"host": "h", "user": "fu"}, {"GSSH_USER": "eu"}, {"user": ""}, "h", "", 22),
]


@pytest.mark.parametrize("file_values, environ, flags, host, user, port", PRECEDENCE_CASES)
def test_layer_precedence(file_values, environ, flags, host, user, port) -> None:
    profile = (
        ProfileResolver()
        .with_layer(ProfileLayer(source="file", **file_values))
        .from_env(environ)
        .from_flags(flags)
        .build()
    )

    assert profile.host == host
    assert profile.user == user
    assert profile.port == port


def test_merged_reports_source_of_each_field() -> None:
    resolver = (
        ProfileResolver()
        .with_layer(ProfileLayer(source="file", host="a", user="u"))
        .from_env({"GSSH_HOST": "b"})
        .from_flags(NO_FLAGS)
    )

    merged = resolver.merged()

    assert merged["host"] == ("b", "env")
    assert merged["user"] == ("u", "file")
    assert merged["port"] == (22, "defaults")
    assert "identity" not in merged


def test_missing_host_is_validation_error() -> None:
    with pytest.raises(ValidationError) as excinfo:
        ProfileResolver().from_env({}).from_flags(NO_FLAGS).build()

    message = str(excinfo.value)
    assert "--host" in message
    assert "GSSH_HOST" in message
    assert "--target" in message


@pytest.mark.parametrize("port", [0, -1, "0", "-5"])
def test_non_positive_port_becomes_default(port) -> None:
    profile = ProfileResolver().from_flags({"host": "h", "port": port}).build()
    assert profile.port == 22


def test_non_numeric_port_is_validation_error() -> None:
    with pytest.raises(ValidationError, match="port must be an integer"):
        ProfileResolver().from_env({"GSSH_HOST": "h", "GSSH_PORT": "ssh"}).build()


def test_builder_cannot_be_reused() -> None:
    resolver = ProfileResolver().from_flags({"host": "h"})
    resolver.build()

    with pytest.raises(RuntimeError):
        resolver.from_flags({"host": "other"})


def test_from_file_keys_are_case_insensitive(tmp_path: Path) -> None:
    path = _profile(
        tmp_path,
        "box.yaml",
        "Host: box.example.com\nUSER: admin\nPort: 2022\nidentity: ~/.ssh/box\nextra: 1\n",
    )

    profile = ProfileResolver().from_file(path).build()

    assert profile == HostProfile(
        host="box.example.com", user="admin", port=2022, identity="~/.ssh/box"
    )


def test_from_file_empty_file_is_empty_layer(tmp_path: Path) -> None:
    path = _profile(tmp_path, "empty.yaml", "")

    resolver = ProfileResolver().from_file(path)

    assert list(resolver.layers[-1].items()) == []


def test_from_file_invalid_yaml_is_config_read_error(tmp_path: Path) -> None:
    path = _profile(tmp_path, "bad.yaml", "host: [unclosed\n")

    with pytest.raises(ConfigReadError) as excinfo:
        ProfileResolver().from_file(path, target="bad")

    assert "failed to read config for target 'bad'" in str(excinfo.value)


def test_from_file_non_mapping_is_config_read_error(tmp_path: Path) -> None:
    path = _profile(tmp_path, "list.yaml", "- a\n- b\n")

    with pytest.raises(ConfigReadError, match="expected a mapping"):
        ProfileResolver().from_file(path)


def test_resolve_profile_from_target(tmp_path: Path) -> None:
    hosts = tmp_path / "hosts"
    _profile(hosts, "ipa.yaml", "host: ipa.diydev.io\n")

    profile = resolve_profile("ipa", [hosts], NO_FLAGS, environ={})

    assert profile == HostProfile(host="ipa.diydev.io", port=22)


def test_resolve_profile_search_order(tmp_path: Path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    _profile(second, "ipa.yaml", "host: second\n")
    _profile(second, "web.yaml", "host: web\n")
    _profile(first, "ipa.yml", "host: first\n")

    assert resolve_profile("ipa", [first, second], NO_FLAGS, environ={}).host == "first"
    assert resolve_profile("web", [first, second], NO_FLAGS, environ={}).host == "web"


def test_resolve_profile_unknown_target(tmp_path: Path) -> None:
    with pytest.raises(ConfigReadError, match="'nope'"):
        resolve_profile("nope", [tmp_path], NO_FLAGS, environ={})


def test_resolve_profile_without_target_reads_no_files(tmp_path: Path) -> None:
    hosts = tmp_path / "hosts"
    _profile(hosts, "broken.yaml", "host: [\n")

    profile = resolve_profile(
        "",
        [hosts],
        {"host": "foo", "user": "bob", "port": 2222, "identity": "/k"},
        environ={},
    )

    assert profile == HostProfile(host="foo", user="bob", port=2222, identity="/k")


def test_resolve_profile_env_overrides_file(tmp_path: Path) -> None:
    hosts = tmp_path / "hosts"
    _profile(hosts, "ipa.yaml", "host: ipa.diydev.io\nuser: root\nport: 25022\n")

    profile = resolve_profile(
        "ipa", [hosts], NO_FLAGS, environ={"GSSH_USER": "deploy", "GSSH_PORT": "0"}
    )

    assert profile == HostProfile(host="ipa.diydev.io", user="deploy", port=22)


def test_from_file_undecodable_bytes_is_config_read_error(tmp_path: Path) -> None:
    path = tmp_path / "win.yaml"
    path.write_bytes(b"host: h\nuser: jos\xe9\n")

    with pytest.raises(ConfigReadError) as excinfo:
        ProfileResolver().from_file(path, target="win")

    message = str(excinfo.value)
    assert message.startswith("failed to read config for target 'win'")
    assert "\n" not in message


@pytest.mark.parametrize("text", ["host: [a, b]\n", "host: h\nuser: {x: 1}\n"])
def test_from_file_non_scalar_value_is_config_read_error(tmp_path: Path, text: str) -> None:
    path = _profile(tmp_path, "nested.yaml", text)

    with pytest.raises(ConfigReadError, match="must be a scalar"):
        ProfileResolver().from_file(path, target="nested")


def test_values_are_kept_verbatim() -> None:
    profile = (
        ProfileResolver()
        .from_flags({"host": "h", "user": " ", "identity": "/keys/id rsa "})
        .build()
    )

    assert profile.user == " "
    assert profile.identity == "/keys/id rsa "
