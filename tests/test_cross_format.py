"""Every entry path must produce the same canonical outputs for one input."""

import argparse

import pytest
from pydantic import BaseModel, Field, ValidationError

from strdur import DurationError, InvalidDurationError, StringDuration, add_duration_argument, loads_toml


class Conf(BaseModel):
    sdv: StringDuration = Field(default_factory=StringDuration)


CASES = [
    pytest.param(
        {
            "input": "",
            "binary": bytes(8),
            "string": "0s",
        },
        id="empty",
    ),
    pytest.param(
        {
            "input": "24h",
            "binary": bytes([0, 0, 79, 145, 148, 78, 0, 0]),
            "string": "24h0m0s",
        },
        id="24h",
    ),
    pytest.param(
        {
            "input": "2562047h47m16s854775807ns",
            "binary": bytes([255, 255, 255, 255, 255, 255, 255, 127]),
            "string": "2562047h47m16.854775807s",
        },
        id="near-max",
    ),
]


def via_flag(sd, case):
    parser = argparse.ArgumentParser()
    add_duration_argument(parser, "--sdv", value=sd)
    parser.parse_args(["--sdv", case["input"]])
    return sd


def via_text(sd, case):
    sd.unmarshal_text(case["input"].encode())
    return sd


def via_json(sd, case):
    sd.unmarshal_json(b'"' + case["input"].encode() + b'"')
    return sd


def via_binary(sd, case):
    sd.unmarshal_binary(case["binary"])
    return sd


def via_toml(sd, case):
    return loads_toml(f'sdv = "{case["input"]}"', Conf).sdv


def via_map(sd, case):
    return Conf.model_validate({"sdv": case["input"]}).sdv


ENTRY_PATHS = [via_flag, via_text, via_json, via_binary, via_toml, via_map]


class TestCrossFormat:
    @pytest.mark.parametrize("case", CASES)
    @pytest.mark.parametrize("entry", ENTRY_PATHS, ids=lambda fn: fn.__name__)
    def test_outputs_agree(self, entry, case):
        sd = entry(StringDuration(), case)
        assert str(sd) == case["string"]
        assert sd.marshal_text() == case["string"].encode()
        assert sd.marshal_json() == b'"' + case["string"].encode() + b'"'
        assert sd.marshal_binary() == case["binary"]

    @pytest.mark.parametrize("entry", [via_text, via_json])
    def test_invalid_input_leaves_value(self, entry, preset):
        with pytest.raises(DurationError):
            entry(preset, {"input": "24hh"})
        assert str(preset) == "1h30m0s"

    @pytest.mark.parametrize("entry", [via_toml, via_map])
    def test_invalid_input_rejected_by_model(self, entry, preset):
        with pytest.raises(ValidationError, match="unknown unit"):
            entry(preset, {"input": "24hh"})

    def test_set_invalid(self, preset):
        with pytest.raises(InvalidDurationError):
            preset.set("24hh")
        assert str(preset) == "1h30m0s"
