#!/usr/bin/env python
import argparse
import logging
import pathlib
import sys

from osuparser.classes.beatmap import Beatmap
from osuparser.classes.hitobjects import Circle, HoldNote, Slider, Spinner
from osuparser.parser.osu import OsuParser


def count_hit_objects(beatmap: Beatmap) -> list[int]:
    """Count the hit objects of each kind, in the order circles, sliders, spinners, hold notes."""
    return [sum(isinstance(obj, cls) for obj in beatmap.hit_objects) for cls in (Circle, Slider, Spinner, HoldNote)]


def get_bpm_range(beatmap: Beatmap) -> tuple[float, float] | None:
    bpms = [tp.bpm for tp in beatmap.timing_points if tp.bpm is not None]
    if not bpms:
        return None
    return min(bpms), max(bpms)


def main() -> int:
    parser = argparse.ArgumentParser(description="Reads an osu! beatmap file and prints out its contents in brief.")
    parser.add_argument("filename", nargs="+", help="input .osu file(s) to read")
    parser.add_argument("--porcelain", action="store_true", help="produce machine readable output")
    parser.add_argument("--strict", action="store_true", help="fail on the first line that cannot be parsed")
    parser.add_argument("--log-level", action="store", help="change logging level. invalid values are silently ignored")
    args = parser.parse_args()

    log_level = logging.WARNING
    if args.log_level is not None:
        try:
            log_level_int = int(args.log_level)
            if log_level_int in logging._levelToName:
                log_level = log_level_int
        except ValueError:
            log_level_str = args.log_level.upper()
            log_level = logging._nameToLevel.get(log_level_str, log_level)
    logging.basicConfig(format="[%(levelname)s %(asctime)s] %(filename)s: %(message)s", level=log_level)

    osu_parser = OsuParser(strict=args.strict)
    for fn in args.filename:
        try:
            fpath = pathlib.Path(fn)
            if fpath.suffix != ".osu":
                raise OSError("invalid file extension")

            with fpath.open("r", encoding="utf-8-sig") as f:
                beatmap = osu_parser.parse_file(f)

            counts = count_hit_objects(beatmap)
            tempo_point_count = sum(tp.is_tempo_point for tp in beatmap.timing_points)
            if args.porcelain:
                print("\t".join(str(n) for n in counts))
                print("\t".join(str(n) for n in [len(beatmap.timing_points), tempo_point_count]))
            else:
                bpm_range = get_bpm_range(beatmap)
                print(fn)
                print("=====    METADATA    =====")
                print(f"TITLE              | {beatmap.display_title}")
                print(f"ARTIST             | {beatmap.display_artist}")
                print(f"CREATOR            | {beatmap.metadata.creator}")
                print(f"VERSION            | {beatmap.metadata.version}")
                print(f"MODE               | {beatmap.general.mode!s}")
                print("=====  HIT OBJECTS   =====")
                print(f"CIRCLE             | {counts[0]:>5}")
                print(f"SLIDER             | {counts[1]:>5}")
                print(f"SPINNER            | {counts[2]:>5}")
                print(f"HOLD               | {counts[3]:>5}")
                print("=====     TIMING     =====")
                print(f"TIMING POINTS      | {len(beatmap.timing_points):>5}")
                print(f"TEMPO POINTS       | {tempo_point_count:>5}")
                if bpm_range is not None:
                    print(f"BPM                | {bpm_range[0]:g}-{bpm_range[1]:g}")
                print()
        except Exception as err:
            if args.porcelain:
                print("\t".join(["-1"] * 4))
                print("\t".join(["-1"] * 2))
                continue
            print(f"{parser.prog}: {type(err).__name__}: {err}")
            print(f"{parser.prog}: error: unable to parse file, or no such file: {fn!r}")
            return 3

    return 0


if __name__ == "__main__":
    sys.exit(main())
