"""
どこで: `util.utils`（構成ファイル読込）。
何を: `configs/default.yaml` とルート `config.yaml` を節単位でマージして返す。
なぜ: パレット生成の既定値（アルゴリズム/段数/フォールバック色など）を
      コードから分離し、`api` 層だけが参照できるようにするため。
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# プロジェクトルートの目印（いずれか 1 つがあればルートとみなす）
_ROOT_MARKERS = (".git", "pyproject.toml", "configs")
_DEFAULT_CONFIG = Path("configs") / "default.yaml"
_OVERRIDE_CONFIG = Path("config.yaml")


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    """YAML を辞書として読む。欠落/構文エラー/非マップは空辞書。"""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """`start` から上位へ辿り、目印を持つ最も近いディレクトリを返す。

    見つからない場合は `start.parent.parent`（典型: <repo>/src/util -> <repo>）。
    """
    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        if any((parent / marker).exists() for marker in _ROOT_MARKERS):
            return parent
    return cur.parent.parent


def _merge_sections(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    # 節（dict）どうしはキー単位で上書き、それ以外は丸ごと置換
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            merged = dict(out[key])
            merged.update(value)
            out[key] = merged
        else:
            out[key] = value
    return out


def load_config(root: Optional[Path] = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（節ごとにキー単位で上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - `root` 省略時はこのファイル位置からプロジェクトルートを推定する。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    config = _safe_load_yaml(project_root / _DEFAULT_CONFIG)
    return _merge_sections(config, _safe_load_yaml(project_root / _OVERRIDE_CONFIG))


def config_section(name: str, root: Optional[Path] = None) -> Dict[str, Any]:
    """`load_config()` のトップレベル節を辞書で返す（欠落/不正時は空辞書）。"""
    section = load_config(root).get(name)
    return dict(section) if isinstance(section, dict) else {}
