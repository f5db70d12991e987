# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
import os

import pytest

from symseek.chaintypes import FileKind, LinkType, SymlinkChain
from symseek.errors import CycleDetectedError, InvalidInputError
from symseek.resolver import resolve, resolve_many, resolve_target


@pytest.mark.parametrize(
    "link_path,link_target,expected",
    [
        ("/usr/bin/link", "../lib/target", "/usr/lib/target"),
        ("/usr/bin/link", "./target", "/usr/bin/target"),
        ("/usr/bin/link", "/opt/app//bin/app", "/opt/app/bin/app"),
        ("/link", "../../../etc/passwd", "/etc/passwd"),
    ],
)
def test_resolve_target(link_path, link_target, expected):
    assert resolve_target(link_path, link_target) == expected


def test_regular_file(tmp_path, make_elf):
    target = make_elf(tmp_path / "bin" / "tool")
    chain = resolve(target)
    assert len(chain) == 1
    assert chain.origin == target
    assert chain.terminal.link_type == LinkType.ORIGIN
    assert chain.terminal.file_type.kind == FileKind.ELF
    assert chain.terminal.target is None


def test_symlink_into_store(tmp_path, store, make_elf, symlink):
    target = make_elf(store / "abc123-foo-1.0" / "bin" / "foo")
    link = symlink(tmp_path / "usr" / "bin" / "foo", target)
    chain = resolve(link)
    assert [node.path for node in chain] == [link, target]
    assert chain[0].link_type == LinkType.ORIGIN
    assert chain[0].file_type.kind == FileKind.SYMLINK
    assert chain[0].target == target
    assert chain[1].link_type == LinkType.SYMLINK
    assert chain[1].file_type.kind == FileKind.ELF


def test_symlink_then_wrapper(tmp_path, store, make_executable, make_elf, symlink):
    target = make_elf(store / "abc123-foo-1.0" / "bin" / ".foo-wrapped")
    wrapper = make_executable(
        store / "xyz-foo-1.0" / "bin" / "foo",
        f'#!/bin/sh\nexec -a "$0" "{target}" "$@"\n'.encode(),
    )
    link = symlink(tmp_path / "usr" / "bin" / "foo", wrapper)
    chain = resolve(link)
    assert [node.path for node in chain] == [link, wrapper, target]
    assert [node.link_type for node in chain] == [
        LinkType.ORIGIN,
        LinkType.SYMLINK,
        LinkType.WRAPPER,
    ]
    assert chain[1].file_type.is_script
    assert chain[1].target == target
    assert chain.terminal.file_type.kind == FileKind.ELF


def test_relative_links_are_normalized(tmp_path, symlink):
    target = tmp_path / "usr" / "lib" / "target"
    target.parent.mkdir(parents=True)
    target.write_text("hello\n")
    link = symlink(tmp_path / "usr" / "bin" / "link", "../lib/target")
    chain = resolve(link)
    assert chain[0].target == str(target)
    assert chain.terminal.path == str(target)
    assert chain.terminal.file_type.kind == FileKind.TEXT


def test_link_chain(tmp_path, make_elf, symlink):
    target = make_elf(tmp_path / "real")
    second = symlink(tmp_path / "second", "real")
    first = symlink(tmp_path / "first", "second")
    chain = resolve(first)
    assert [node.path for node in chain] == [first, second, target]
    assert [node.file_type.kind for node in chain] == [
        FileKind.SYMLINK,
        FileKind.SYMLINK,
        FileKind.ELF,
    ]


def test_broken_link(tmp_path, symlink):
    link = symlink(tmp_path / "dangling", tmp_path / "nowhere")
    chain = resolve(link)
    assert len(chain) == 2
    assert chain.terminal.path == str(tmp_path / "nowhere")
    assert chain.terminal.file_type.kind == FileKind.MISSING
    assert chain.terminal.link_type == LinkType.SYMLINK


def test_link_to_directory(tmp_path, symlink):
    (tmp_path / "dir").mkdir()
    link = symlink(tmp_path / "link", "dir")
    chain = resolve(link)
    assert chain.terminal.path == str(tmp_path / "dir")
    assert chain.terminal.file_type.kind == FileKind.UNKNOWN


def test_self_cycle(tmp_path, symlink):
    link = symlink(tmp_path / "a", "a")
    with pytest.raises(CycleDetectedError) as excinfo:
        resolve(link)
    assert excinfo.value.path == link
    assert [node.path for node in excinfo.value.chain] == [link]


def test_two_link_cycle(tmp_path, symlink):
    a = symlink(tmp_path / "a", "b")
    b = symlink(tmp_path / "b", "a")
    with pytest.raises(CycleDetectedError) as excinfo:
        resolve(a)
    assert excinfo.value.path == a
    assert [node.path for node in excinfo.value.chain] == [a, b]


def test_wrapper_cycle(store, make_executable):
    first = str(store / "aaa-foo" / "bin" / "foo")
    second = str(store / "bbb-foo" / "bin" / "foo")
    make_executable(store / "aaa-foo" / "bin" / "foo", f"#!/bin/sh\nexec {second}\n".encode())
    make_executable(store / "bbb-foo" / "bin" / "foo", f"#!/bin/sh\nexec {first}\n".encode())
    with pytest.raises(CycleDetectedError) as excinfo:
        resolve(first)
    assert [node.link_type for node in excinfo.value.chain] == [LinkType.ORIGIN, LinkType.WRAPPER]


def test_relative_input():
    with pytest.raises(InvalidInputError):
        resolve("relative/path")


def test_missing_input(tmp_path):
    with pytest.raises(InvalidInputError) as excinfo:
        resolve(tmp_path / "nope")
    assert excinfo.value.reason == "does not exist"


def test_directory_input(tmp_path):
    with pytest.raises(InvalidInputError):
        resolve(tmp_path)


def test_input_is_normalized(tmp_path, make_elf):
    target = make_elf(tmp_path / "bin" / "tool")
    chain = resolve(f"{tmp_path}/bin/../bin//tool")
    assert chain.origin == target


def test_resolution_is_repeatable(tmp_path, store, make_elf, symlink):
    target = make_elf(store / "abc123-foo" / "bin" / "foo")
    link = symlink(tmp_path / "foo", target)
    assert resolve(link) == resolve(link)


def test_chain_shape(tmp_path, store, make_executable, make_elf, symlink):
    target = make_elf(store / "abc123-foo" / "bin" / "foo")
    wrapper = make_executable(store / "xyz-foo" / "bin" / "foo", f"exec {target}\n".encode())
    link = symlink(tmp_path / "foo", wrapper)
    chain = resolve(link)
    paths = [node.path for node in chain]
    assert len(set(paths)) == len(paths)
    for node, following in zip(chain, chain.nodes[1:]):
        assert node.target == following.path
    assert all(os.path.isabs(path) for path in paths)


def test_resolve_many(tmp_path, make_elf):
    good = make_elf(tmp_path / "tool")
    results = resolve_many([good, "relative", tmp_path / "missing"])
    assert [path for path, _ in results] == [good, "relative", str(tmp_path / "missing")]
    assert isinstance(results[0][1], SymlinkChain)
    assert isinstance(results[1][1], InvalidInputError)
    assert isinstance(results[2][1], InvalidInputError)


def test_terminal_resolves_to_itself_after_symlink(tmp_path, store, make_elf, symlink):
    target = make_elf(store / "abc123-foo-1.0" / "bin" / "foo")
    chain = resolve(symlink(tmp_path / "usr" / "bin" / "foo", target))
    again = resolve(chain.terminal.path)
    assert len(again) == 1
    assert again.origin == chain.terminal.path
    assert again.terminal.file_type == chain.terminal.file_type


def test_terminal_resolves_to_itself_after_wrapper(store, make_executable, make_elf):
    target = make_elf(store / "abc123-foo-1.0" / "bin" / ".foo-wrapped")
    wrapper = make_executable(
        store / "xyz-foo-1.0" / "bin" / "foo", f'#!/bin/sh\nexec "{target}" "$@"\n'.encode()
    )
    chain = resolve(wrapper)
    assert chain.terminal.path == target
    again = resolve(chain.terminal.path)
    assert len(again) == 1
    assert again.terminal.file_type == chain.terminal.file_type
