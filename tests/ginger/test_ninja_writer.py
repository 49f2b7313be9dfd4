import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from ginger.emitter.ninja_writer import render_build_graph, write_build_graph
from ginger.ginger_types.context import BuildContext, SourceFile

SEP = os.sep


def _source(name: str, extension: str = ".c", *dirs: str) -> SourceFile:
    return SourceFile(name=name, path=SEP.join((".",) + dirs + ("",)), extension=extension)


def test_single_source_document():
    context = BuildContext(
        compiler="cc",
        linker="cc",
        build_directory="out",
        target="app",
        source_files=[_source("a")],
    )

    assert render_build_graph(context) == (
        "#ginger ninja file\n"
        "\n"
        "target = app\n"
        "builddir = out\n"
        "cc = cc\n"
        "ll = cc\n"
        "\n"
        "rule compile\n"
        "  command = $cc $cf -c $in -o $out\n"
        "\n"
        "rule link\n"
        "  command = $ll $lf $in -o $out\n"
        "\n"
        f"build $builddir{SEP}a.o: compile .{SEP}a.c\n"
        "\n"
        f"build $target : link $builddir{SEP}a.o\n"
        "\n"
        "default $target\n"
    )


def test_flags_and_include_paths():
    context = BuildContext(
        compiler="gcc",
        compiler_flags=["-Wall", "-O2"],
        linker="gcc",
        linker_flags=["-lm"],
        include_paths=["./include", "./src"],
        source_files=[_source("main")],
    )

    lines = render_build_graph(context).splitlines()

    assert 'cf = -Wall -O2 -I "./include" -I "./src"' in lines
    assert "lf = -lm" in lines
    assert lines.index("cc = gcc") < lines.index('cf = -Wall -O2 -I "./include" -I "./src"') < lines.index("ll = gcc")


def test_include_paths_need_compiler_flags():
    context = BuildContext(
        compiler="gcc",
        linker="gcc",
        include_paths=["./include"],
        source_files=[_source("main")],
    )

    text = render_build_graph(context)

    assert "cf =" not in text
    assert "lf =" not in text
    assert "-I" not in text


def test_nested_sources_are_rooted_under_builddir():
    context = BuildContext(
        compiler="g++",
        linker="g++",
        source_files=[_source("util", ".cpp", "src", "core")],
    )

    text = render_build_graph(context)

    assert f"build $builddir{SEP}src{SEP}core{SEP}util.o: compile .{SEP}src{SEP}core{SEP}util.cpp\n" in text


def test_multi_file_link_edge_continuations():
    context = BuildContext(
        compiler="cc",
        linker="cc",
        source_files=[_source("a"), _source("b", ".cpp", "lib"), _source("c")],
    )

    lines = render_build_graph(context).splitlines()
    start = lines.index(f"build $target : link $builddir{SEP}a.o $")

    assert lines[start + 1] == f"                     $builddir{SEP}lib{SEP}b.o $"
    assert lines[start + 2] == f"                     $builddir{SEP}c.o"
    assert lines[start + 3:] == ["", "default $target"]


def test_compile_edges_follow_source_order():
    names = ["zeta", "alpha", "mid"]
    context = BuildContext(compiler="cc", linker="cc", source_files=[_source(n) for n in names])

    edges = [line for line in render_build_graph(context).splitlines() if line.endswith(".c")]

    assert edges == [f"build $builddir{SEP}{n}.o: compile .{SEP}{n}.c" for n in names]


def test_absolute_source_paths_are_kept():
    source = SourceFile(name="a", path="/work/src/", extension=".c")
    context = BuildContext(compiler="cc", linker="cc", source_files=[source])

    assert "build $builddir/work/src/a.o: compile /work/src/a.c\n" in render_build_graph(context)


def test_write_replaces_existing_file(tmp_path):
    ninja_file = tmp_path / "build.ninja"
    ninja_file.write_text("stale content that is much longer than anything else\n" * 100)
    context = BuildContext(compiler="cc", linker="cc", source_files=[_source("a")])

    write_build_graph(ninja_file, context)

    assert ninja_file.read_bytes() == render_build_graph(context).encode("utf-8")


def test_write_to_missing_directory_raises(tmp_path):
    context = BuildContext(compiler="cc", linker="cc", source_files=[_source("a")])

    with pytest.raises(OSError):
        write_build_graph(tmp_path / "missing" / "build.ninja", context)
