"""`pigment` コマンドラインエントリ。

サブコマンド:
- `shades SEED`   : シェードスケールを生成（省略引数は構成値）
- `harmony`       : ランダムハーモニーのシェードパレット
- `fan SEED`      : ファン配置の色（最大 16 色）と位置
- `name COLOR...` : 色リストの一貫名（`--random N` でランダム候補）
- `contrast A B`  : WCAG コントラスト比と適合レベル

前提: `pip install -e .` 済みで `pigment`/`api` を import 可能であること。
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

import numpy as np

from common.logging import setup_default_logging
from pigment import (
    PigmentError,
    consistent_name,
    contrast_ratio,
    format_color,
    parse_color,
    random_names,
    wcag_level,
)
from pigment.palette import Palette

from . import palette as palette_api


def _print_palette(pal: Palette) -> None:
    print(f"{pal.name}  ({pal.algorithm.value}, seed {pal.base_color.hex})")
    for shade in pal.shades:
        marker = "*" if shade.is_active else " "
        hsl = format_color(shade.color, "hsl")
        print(f" {marker} {shade.name:>5}  {shade.color.hex}  {hsl:<22} {shade.contrast:5.2f}")


def _emit(data: Any, as_json: bool, text: Any) -> None:
    if as_json:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        text()


def _cmd_shades(args: argparse.Namespace) -> None:
    pal = palette_api.generate_palette(
        parse_color(args.seed),
        algorithm=args.algorithm,
        shade_count=args.count,
        contrast_shift=args.contrast,
        naming_pattern=args.pattern,
        label=args.label,
    )
    _emit(pal.to_dict(), args.json, lambda: _print_palette(pal))


def _cmd_harmony(args: argparse.Namespace) -> None:
    pal = palette_api.harmony_palette(args.seed, step=args.step, harmony=args.harmony)
    _emit(pal.to_dict(), args.json, lambda: _print_palette(pal))


def _cmd_fan(args: argparse.Namespace) -> None:
    entries = palette_api.fan(parse_color(args.seed))
    data = [
        {"hex": c.hex, "x": round(p.x, 2), "y": round(p.y, 2), "angle": round(p.angle, 2)}
        for c, p in entries
    ]

    def _text() -> None:
        for row in data:
            print(f"{row['hex']}  angle={row['angle']:7.2f}  x={row['x']:8.2f}  y={row['y']:8.2f}")

    _emit(data, args.json, _text)


def _cmd_name(args: argparse.Namespace) -> None:
    colors = [parse_color(c) for c in args.colors]
    data: dict[str, Any] = {"consistent": consistent_name(colors)}
    if args.random:
        data["random"] = random_names(colors, args.random, np.random.default_rng(args.seed))

    def _text() -> None:
        print(data["consistent"])
        for name in data.get("random", []):
            print(f"  - {name}")

    _emit(data, args.json, _text)


def _cmd_contrast(args: argparse.Namespace) -> None:
    ratio = contrast_ratio(parse_color(args.foreground), parse_color(args.background))
    data = {"ratio": round(ratio, 2), "level": wcag_level(ratio)}
    _emit(data, args.json, lambda: print(f"{data['ratio']:.2f}:1  {data['level']}"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pigment", description="Color palette generator.")
    parser.add_argument("--log-level", default=None, help="logging level (default: PIGMENT_LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("shades", help="generate a shade scale from a seed color")
    p.add_argument("seed", help="seed color (hex, rgb(), hsl() or a basic name)")
    p.add_argument("--algorithm", "-a", default=None)
    p.add_argument("--count", "-n", type=int, default=None)
    p.add_argument("--contrast", "-c", type=float, default=None)
    p.add_argument("--pattern", "-p", default=None)
    p.add_argument("--label", default=None)
    p.set_defaults(func=_cmd_shades)

    p = sub.add_parser("harmony", help="generate a random harmony shade palette")
    p.add_argument("--seed", type=int, default=None, help="random seed for reproducible output")
    p.add_argument("--step", type=int, default=0)
    p.add_argument("--harmony", default=None)
    p.set_defaults(func=_cmd_harmony)

    p = sub.add_parser("fan", help="list harmony fan colors and positions")
    p.add_argument("seed")
    p.set_defaults(func=_cmd_fan)

    p = sub.add_parser("name", help="name a list of colors")
    p.add_argument("colors", nargs="+")
    p.add_argument("--random", type=int, default=0, help="also suggest N random names")
    p.add_argument("--seed", type=int, default=None)
    p.set_defaults(func=_cmd_name)

    p = sub.add_parser("contrast", help="WCAG contrast ratio of two colors")
    p.add_argument("foreground")
    p.add_argument("background")
    p.set_defaults(func=_cmd_contrast)

    for action in sub.choices.values():
        action.add_argument("--json", action="store_true", help="emit JSON instead of text")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)
    try:
        args.func(args)
    except PigmentError as exc:
        print(f"pigment: error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
