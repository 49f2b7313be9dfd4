import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from ginger.ginger_types.context import BuildContext, SourceFile
from ginger.ginger_types.exceptions import (
    ConfigurationError,
    MissingDirectiveError,
    NoSourceFilesError,
)
from ginger.validation.validator import validate_context


def _make_context(**overrides) -> BuildContext:
    fields = {
        "compiler": "gcc",
        "linker": "gcc",
        "target": "app",
        "source_files": [SourceFile(name="main", path="./", extension=".c")],
    }
    fields.update(overrides)
    return BuildContext(**fields)


def test_complete_context_passes():
    assert validate_context(_make_context()) is None


def test_missing_compiler_fails():
    with pytest.raises(MissingDirectiveError) as excinfo:
        validate_context(_make_context(compiler="", compiler_flags=["-Wall"], linker_flags=["-lm"]))

    assert excinfo.value.directive == "-cc"
    assert str(excinfo.value) == "invalid ginger file: -cc not defined"


def test_missing_linker_fails():
    with pytest.raises(MissingDirectiveError) as excinfo:
        validate_context(_make_context(linker=""))

    assert str(excinfo.value) == "invalid ginger file: -ll not defined"


def test_compiler_checked_before_linker():
    with pytest.raises(MissingDirectiveError) as excinfo:
        validate_context(_make_context(compiler="", linker=""))

    assert excinfo.value.directive == "-cc"


def test_no_sources_fails():
    with pytest.raises(NoSourceFilesError) as excinfo:
        validate_context(_make_context(source_files=[]))

    assert isinstance(excinfo.value, ConfigurationError)
    assert str(excinfo.value) == "no source files detected"


def test_empty_target_is_allowed():
    validate_context(_make_context(target=""))


def test_default_build_directory_is_allowed():
    context = _make_context()

    validate_context(context)

    assert context.build_directory == "."
