"""
アーキテクチャテスト

目的:
- 数値レイヤ（外側→内側のみ許可、同層は許可）
- 個別禁止エッジ（コア `pigment` は設定/入口層に依存しない）
- モジュール単位の import サイクル検出
"""

from __future__ import annotations

import ast
import pathlib
from typing import Dict, Iterator, List, Optional, Set, Tuple

import pytest

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"

# レイヤ定義（数値が小さいほど内側）
# L0: Core/Base, L1: Domain（色エンジン）, L2: API/Entry
LAYER_MAP = {
    ("common",): 0,
    ("util",): 0,
    ("pigment",): 1,
    ("api",): 2,
}

CHECK_ROOTS = {"api", "pigment", "common", "util"}


def iter_py_files(root: pathlib.Path) -> Iterator[pathlib.Path]:
    for p in root.rglob("*.py"):
        # 除外: テスト自身、キャッシュ
        if any(part in {"tests", "__pycache__"} for part in p.parts):
            continue
        yield p


def module_name_from_path(path: pathlib.Path) -> str:
    rel = path.relative_to(SRC_DIR).with_suffix("")
    parts = rel.parts[:-1] if rel.parts[-1] == "__init__" else rel.parts
    return ".".join(parts)


def split_head(module: str) -> str:
    return module.split(".")[0] if module else ""


def layer_of(module: str) -> Optional[int]:
    head = split_head(module)
    return LAYER_MAP.get((head,)) if head else None


def iter_import_edges(py_path: pathlib.Path) -> Iterator[Tuple[str, str]]:
    src_mod = module_name_from_path(py_path)
    is_pkg = py_path.name == "__init__.py"
    text = py_path.read_text(encoding="utf-8")
    tree = ast.parse(text, filename=str(py_path))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield src_mod, alias.name  # 例: "numpy"
        elif isinstance(node, ast.ImportFrom):
            if node.level > 0:  # 相対 import
                src_parts = src_mod.split(".")
                # パッケージ自身（__init__）は 1 段浅く数える
                drop = node.level - 1 if is_pkg else node.level
                base = ".".join(src_parts[: len(src_parts) - drop])
                mod = node.module or ""
                if mod:
                    yield src_mod, f"{base}.{mod}"
                else:
                    # `from . import x` は x をサブモジュールとして扱う
                    for alias in node.names:
                        yield src_mod, f"{base}.{alias.name}"
            else:
                yield src_mod, node.module or ""


def is_forbidden_edge(src: str, tgt: str) -> bool:
    s_head = split_head(src)
    t_head = split_head(tgt)
    # 1) pigment -> util/api を禁止（コアは設定ファイルや入口層を知らない）
    if s_head == "pigment" and t_head in {"util", "api"}:
        return True
    # 2) common/util -> pigment/api を禁止
    if s_head in {"common", "util"} and t_head in {"pigment", "api"}:
        return True
    # 3) アルゴリズムレジストリ参照は pigment 内部のみ
    if tgt == "pigment.algorithms.registry" and s_head != "pigment":
        return True
    return False


def within_check_scope(module: str) -> bool:
    return split_head(module) in CHECK_ROOTS


def collect_graph_and_violations() -> tuple[Dict[str, Set[str]], list[str], list[str]]:
    layering: list[str] = []
    forbidden: list[str] = []
    graph: Dict[str, Set[str]] = {}

    # 1) すべてのモジュール名（ノード）を集める
    py_files: List[pathlib.Path] = list(iter_py_files(SRC_DIR))
    for py in py_files:
        graph.setdefault(module_name_from_path(py), set())

    # 2) エッジを収集し、違反チェック
    for py in py_files:
        for src, tgt in iter_import_edges(py):
            if not within_check_scope(src) or not within_check_scope(tgt):
                continue
            s_layer = layer_of(src)
            t_layer = layer_of(tgt)
            if s_layer is not None and t_layer is not None and s_layer < t_layer:
                layering.append(f"[{py}] {src} (L{s_layer}) -> {tgt} (L{t_layer})")
            if is_forbidden_edge(src, tgt):
                forbidden.append(f"[{py}] {src} -> {tgt}")
            # グラフに追加（ターゲットが既知モジュールで、パッケージ自身への参照でないとき）
            if src in graph and tgt in graph and not src.startswith(tgt + "."):
                graph[src].add(tgt)

    return graph, layering, forbidden


def find_cycles(graph: Dict[str, Set[str]]) -> List[List[str]]:
    cycles: List[List[str]] = []
    WHITE, GRAY, BLACK = 0, 1, 2
    color: Dict[str, int] = {u: WHITE for u in graph}
    stack: List[str] = []

    def dfs(u: str) -> None:
        color[u] = GRAY
        stack.append(u)
        for v in sorted(graph.get(u, ())):  # 隣接
            if color[v] == WHITE:
                dfs(v)
            elif color[v] == GRAY:
                # サイクル検出（スタック上の v から末尾まで）
                idx = stack.index(v)
                cycle = stack[idx:] + [v]
                # 代表は辞書順最小の開始点に回転
                base = min(range(len(cycle) - 1), key=lambda i: cycle[i])
                norm = cycle[base:-1] + cycle[:base] + [cycle[base]]
                if norm not in cycles:
                    cycles.append(norm)
        stack.pop()
        color[u] = BLACK

    for node in sorted(graph):
        if color[node] == WHITE:
            dfs(node)
    return cycles


def test_forbidden_edge_rules() -> None:
    assert is_forbidden_edge("pigment.shades", "util.utils")
    assert is_forbidden_edge("pigment.harmony", "api.palette")
    assert is_forbidden_edge("common.settings", "pigment.engine")
    assert is_forbidden_edge("api.cli", "pigment.algorithms.registry")
    assert not is_forbidden_edge("pigment.shades", "pigment.algorithms.registry")
    assert not is_forbidden_edge("api.palette", "util.utils")


def test_find_cycles_detects_simple_loop() -> None:
    graph = {"a": {"b"}, "b": {"c"}, "c": {"a"}, "d": set()}
    assert find_cycles(graph) == [["a", "b", "c", "a"]]


@pytest.mark.smoke
def test_architecture_import_rules():
    graph, layering, forbidden = collect_graph_and_violations()
    cycles = find_cycles(graph)
    msgs: list[str] = []
    if layering:
        msgs.append("Layer violations:\n" + "\n".join(layering))
    if forbidden:
        msgs.append("Forbidden-edge violations:\n" + "\n".join(forbidden))
    if cycles:
        # 表示数を制限してノイズを抑制
        rendered = [" -> ".join(c) for c in cycles[:10]]
        suffix = "\n(and more ...)" if len(cycles) > 10 else ""
        msgs.append("Import cycles detected (module-level):\n" + "\n".join(rendered) + suffix)
    if msgs:
        raise AssertionError("\n\n".join(msgs))
