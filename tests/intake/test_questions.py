"""Tests for the installer's prompt sequence."""

import pytest

from defender_installer.intake import ScriptedInput, collect, identity_fields, option_fields
from defender_installer.spec import InstallerDefaults


def test_identity_prompts_without_registry(defaults):
    source = ScriptedInput(["img", "", "tok", ""])
    answers = collect(identity_fields(defaults), source)
    assert answers == {"image": "img", "name": "tw-defender", "token": "tok", "registry_login": False}
    assert source.prompts[1] == "Container name [tw-defender]: "


def test_identity_prompts_with_registry(defaults):
    source = ScriptedInput(["img", "", "", "y", "bob", "pw"])
    answers = collect(identity_fields(defaults), source)
    assert answers["registry_username"] == "bob"
    assert answers["registry_password"] == "pw"
    assert source.secret_prompts == ["Registry password: "]


def test_identity_missing_image_aborts(defaults):
    source = ScriptedInput([""])
    with pytest.raises(ValueError, match="You must provide the container image URI."):
        collect(identity_fields(defaults), source)
    assert len(source.prompts) == 1


def test_identity_name_default_from_config():
    source = ScriptedInput(["img", "", "", ""])
    answers = collect(identity_fields(InstallerDefaults(name="edge")), source)
    assert answers["name"] == "edge"


def test_option_prompts_container_mode(defaults):
    # mode, privileged, network, mounts?, token now?, env?, restart
    source = ScriptedInput(["", "", "", "", "", "", ""])
    answers = collect(option_fields(defaults), source, {"token": ""})
    assert answers["mode"] == "docker"
    assert answers["privileged"] is True
    assert answers["host_network"] is True
    assert answers["mounts"] == []
    assert answers["token_now"] is False
    assert answers["env"] == []
    assert answers["restart_policy"] == "unless-stopped"
    assert "platform" not in answers
    assert "namespace" not in answers


def test_option_prompts_token_now_skipped_when_token_given(defaults):
    # mode, privileged, network, mounts?, env?, restart
    source = ScriptedInput(["", "", "", "", "", ""])
    answers = collect(option_fields(defaults), source, {"token": "tok"})
    assert "token_now" not in answers
    assert source.responses == []


def test_option_prompts_late_token(defaults):
    source = ScriptedInput(["", "", "", "", "y", "late", "", ""])
    answers = collect(option_fields(defaults), source, {"token": ""})
    assert answers["late_token"] == "late"
    assert source.prompts[5] == "DEFENDER_TOKEN: "


def test_option_prompts_manifest_mode(defaults):
    # mode, mounts?, env?, platform, namespace
    source = ScriptedInput(["manifests", "", "", "openshift", ""])
    answers = collect(option_fields(defaults), source, {"token": "tok"})
    assert answers["platform"] == "openshift"
    assert answers["namespace"] == "prismacloud"
    assert "privileged" not in answers
    assert "host_network" not in answers
    assert "restart_policy" not in answers


def test_option_prompts_manifest_mode_from_defaults(openshift_defaults):
    source = ScriptedInput(["", "", "", "", ""])
    answers = collect(option_fields(openshift_defaults), source, {"token": "tok"})
    assert answers["mode"] == "manifests"
    assert answers["platform"] == "openshift"
    assert answers["namespace"] == "twistlock"
