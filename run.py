from rich import print

from krpanod.tiles import zoom_levels
from krpanod.my_utils import (
    format_pixels,
    open_metadata,
    parse_args,
    timer
)


def main(args) -> tuple[int, int]:
    metadata = open_metadata(args.metadata)
    levels, errors = zoom_levels(metadata, args.base_url)

    if limit:= args.limit:
        levels = levels[:limit]

    for level in levels:
        cols, rows = level.grid
        print(
            f"[green][OK] {level.name} "
            f"| w*h {format_pixels(*level.size)} "
            f"| tiles: {cols}x{rows} of {level.tile_size.x}px[/]"
        )
        if args.tiles:
            for _, _, url in level.tiles():
                print(f"    {url}")

    return len(levels), len(errors)


if __name__ == "__main__":
    try:
        args = parse_args()

        with timer() as t:
            total_levels, failed_levels = main(args)

        print(f"\n[gray]{'-' * 85}[/]")
        print(f"\n[orange1]| Resolved [green]{total_levels}[/] levels ([red]{failed_levels}[/] failed) in [green]{t.time_elapsed}[/][/]\n")
    except Exception as error:
        print(f"[red][MAIN] Error: {error}[/]")
    except KeyboardInterrupt:
        print("[red]Keyboard Interrupted[/]")
