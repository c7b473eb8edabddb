"""Box-drawing characters and the joining of overlapping line graphics."""

from __future__ import annotations

from typing import Any

HORIZONTAL_ELLIPSIS = "\u2026"

BOX_DRAWINGS_LIGHT_HORIZONTAL = "\u2500"
BOX_DRAWINGS_HEAVY_HORIZONTAL = "\u2501"
BOX_DRAWINGS_LIGHT_VERTICAL = "\u2502"
BOX_DRAWINGS_HEAVY_VERTICAL = "\u2503"
BOX_DRAWINGS_LIGHT_TRIPLE_DASH_HORIZONTAL = "\u2504"
BOX_DRAWINGS_HEAVY_TRIPLE_DASH_HORIZONTAL = "\u2505"
BOX_DRAWINGS_LIGHT_TRIPLE_DASH_VERTICAL = "\u2506"
BOX_DRAWINGS_HEAVY_TRIPLE_DASH_VERTICAL = "\u2507"
BOX_DRAWINGS_LIGHT_QUADRUPLE_DASH_HORIZONTAL = "\u2508"
BOX_DRAWINGS_HEAVY_QUADRUPLE_DASH_HORIZONTAL = "\u2509"
BOX_DRAWINGS_LIGHT_QUADRUPLE_DASH_VERTICAL = "\u250a"
BOX_DRAWINGS_HEAVY_QUADRUPLE_DASH_VERTICAL = "\u250b"
BOX_DRAWINGS_LIGHT_DOWN_AND_RIGHT = "\u250c"
BOX_DRAWINGS_DOWN_LIGHT_AND_RIGHT_HEAVY = "\u250d"
BOX_DRAWINGS_DOWN_HEAVY_AND_RIGHT_LIGHT = "\u250e"
BOX_DRAWINGS_HEAVY_DOWN_AND_RIGHT = "\u250f"
BOX_DRAWINGS_LIGHT_DOWN_AND_LEFT = "\u2510"
BOX_DRAWINGS_DOWN_LIGHT_AND_LEFT_HEAVY = "\u2511"
BOX_DRAWINGS_DOWN_HEAVY_AND_LEFT_LIGHT = "\u2512"
BOX_DRAWINGS_HEAVY_DOWN_AND_LEFT = "\u2513"
BOX_DRAWINGS_LIGHT_UP_AND_RIGHT = "\u2514"
BOX_DRAWINGS_UP_LIGHT_AND_RIGHT_HEAVY = "\u2515"
BOX_DRAWINGS_UP_HEAVY_AND_RIGHT_LIGHT = "\u2516"
BOX_DRAWINGS_HEAVY_UP_AND_RIGHT = "\u2517"
BOX_DRAWINGS_LIGHT_UP_AND_LEFT = "\u2518"
BOX_DRAWINGS_UP_LIGHT_AND_LEFT_HEAVY = "\u2519"
BOX_DRAWINGS_UP_HEAVY_AND_LEFT_LIGHT = "\u251a"
BOX_DRAWINGS_HEAVY_UP_AND_LEFT = "\u251b"
BOX_DRAWINGS_LIGHT_VERTICAL_AND_RIGHT = "\u251c"
BOX_DRAWINGS_VERTICAL_LIGHT_AND_RIGHT_HEAVY = "\u251d"
BOX_DRAWINGS_UP_HEAVY_AND_RIGHT_DOWN_LIGHT = "\u251e"
BOX_DRAWINGS_DOWN_HEAVY_AND_RIGHT_UP_LIGHT = "\u251f"
BOX_DRAWINGS_VERTICAL_HEAVY_AND_RIGHT_LIGHT = "\u2520"
BOX_DRAWINGS_DOWN_LIGHT_AND_RIGHT_UP_HEAVY = "\u2521"
BOX_DRAWINGS_UP_LIGHT_AND_RIGHT_DOWN_HEAVY = "\u2522"
BOX_DRAWINGS_HEAVY_VERTICAL_AND_RIGHT = "\u2523"
BOX_DRAWINGS_LIGHT_VERTICAL_AND_LEFT = "\u2524"
BOX_DRAWINGS_VERTICAL_LIGHT_AND_LEFT_HEAVY = "\u2525"
BOX_DRAWINGS_UP_HEAVY_AND_LEFT_DOWN_LIGHT = "\u2526"
BOX_DRAWINGS_DOWN_HEAVY_AND_LEFT_UP_LIGHT = "\u2527"
BOX_DRAWINGS_VERTICAL_HEAVY_AND_LEFT_LIGHT = "\u2528"
BOX_DRAWINGS_DOWN_LIGHT_AND_LEFT_UP_HEAVY = "\u2529"
BOX_DRAWINGS_UP_LIGHT_AND_LEFT_DOWN_HEAVY = "\u252a"
BOX_DRAWINGS_HEAVY_VERTICAL_AND_LEFT = "\u252b"
BOX_DRAWINGS_LIGHT_DOWN_AND_HORIZONTAL = "\u252c"
BOX_DRAWINGS_LEFT_HEAVY_AND_RIGHT_DOWN_LIGHT = "\u252d"
BOX_DRAWINGS_RIGHT_HEAVY_AND_LEFT_DOWN_LIGHT = "\u252e"
BOX_DRAWINGS_DOWN_LIGHT_AND_HORIZONTAL_HEAVY = "\u252f"
BOX_DRAWINGS_DOWN_HEAVY_AND_HORIZONTAL_LIGHT = "\u2530"
BOX_DRAWINGS_RIGHT_LIGHT_AND_LEFT_DOWN_HEAVY = "\u2531"
BOX_DRAWINGS_LEFT_LIGHT_AND_RIGHT_DOWN_HEAVY = "\u2532"
BOX_DRAWINGS_HEAVY_DOWN_AND_HORIZONTAL = "\u2533"
BOX_DRAWINGS_LIGHT_UP_AND_HORIZONTAL = "\u2534"
BOX_DRAWINGS_LEFT_HEAVY_AND_RIGHT_UP_LIGHT = "\u2535"
BOX_DRAWINGS_RIGHT_HEAVY_AND_LEFT_UP_LIGHT = "\u2536"
BOX_DRAWINGS_UP_LIGHT_AND_HORIZONTAL_HEAVY = "\u2537"
BOX_DRAWINGS_UP_HEAVY_AND_HORIZONTAL_LIGHT = "\u2538"
BOX_DRAWINGS_RIGHT_LIGHT_AND_LEFT_UP_HEAVY = "\u2539"
BOX_DRAWINGS_LEFT_LIGHT_AND_RIGHT_UP_HEAVY = "\u253a"
BOX_DRAWINGS_HEAVY_UP_AND_HORIZONTAL = "\u253b"
BOX_DRAWINGS_LIGHT_VERTICAL_AND_HORIZONTAL = "\u253c"
BOX_DRAWINGS_LEFT_HEAVY_AND_RIGHT_VERTICAL_LIGHT = "\u253d"
BOX_DRAWINGS_RIGHT_HEAVY_AND_LEFT_VERTICAL_LIGHT = "\u253e"
BOX_DRAWINGS_VERTICAL_LIGHT_AND_HORIZONTAL_HEAVY = "\u253f"
BOX_DRAWINGS_UP_HEAVY_AND_DOWN_HORIZONTAL_LIGHT = "\u2540"
BOX_DRAWINGS_DOWN_HEAVY_AND_UP_HORIZONTAL_LIGHT = "\u2541"
BOX_DRAWINGS_VERTICAL_HEAVY_AND_HORIZONTAL_LIGHT = "\u2542"
BOX_DRAWINGS_LEFT_UP_HEAVY_AND_RIGHT_DOWN_LIGHT = "\u2543"
BOX_DRAWINGS_RIGHT_UP_HEAVY_AND_LEFT_DOWN_LIGHT = "\u2544"
BOX_DRAWINGS_LEFT_DOWN_HEAVY_AND_RIGHT_UP_LIGHT = "\u2545"
BOX_DRAWINGS_RIGHT_DOWN_HEAVY_AND_LEFT_UP_LIGHT = "\u2546"
BOX_DRAWINGS_DOWN_LIGHT_AND_UP_HORIZONTAL_HEAVY = "\u2547"
BOX_DRAWINGS_UP_LIGHT_AND_DOWN_HORIZONTAL_HEAVY = "\u2548"
BOX_DRAWINGS_RIGHT_LIGHT_AND_LEFT_VERTICAL_HEAVY = "\u2549"
BOX_DRAWINGS_LEFT_LIGHT_AND_RIGHT_VERTICAL_HEAVY = "\u254a"
BOX_DRAWINGS_HEAVY_VERTICAL_AND_HORIZONTAL = "\u254b"
BOX_DRAWINGS_LIGHT_DOUBLE_DASH_HORIZONTAL = "\u254c"
BOX_DRAWINGS_HEAVY_DOUBLE_DASH_HORIZONTAL = "\u254d"
BOX_DRAWINGS_LIGHT_DOUBLE_DASH_VERTICAL = "\u254e"
BOX_DRAWINGS_HEAVY_DOUBLE_DASH_VERTICAL = "\u254f"
BOX_DRAWINGS_DOUBLE_HORIZONTAL = "\u2550"
BOX_DRAWINGS_DOUBLE_VERTICAL = "\u2551"
BOX_DRAWINGS_DOWN_SINGLE_AND_RIGHT_DOUBLE = "\u2552"
BOX_DRAWINGS_DOWN_DOUBLE_AND_RIGHT_SINGLE = "\u2553"
BOX_DRAWINGS_DOUBLE_DOWN_AND_RIGHT = "\u2554"
BOX_DRAWINGS_DOWN_SINGLE_AND_LEFT_DOUBLE = "\u2555"
BOX_DRAWINGS_DOWN_DOUBLE_AND_LEFT_SINGLE = "\u2556"
BOX_DRAWINGS_DOUBLE_DOWN_AND_LEFT = "\u2557"
BOX_DRAWINGS_UP_SINGLE_AND_RIGHT_DOUBLE = "\u2558"
BOX_DRAWINGS_UP_DOUBLE_AND_RIGHT_SINGLE = "\u2559"
BOX_DRAWINGS_DOUBLE_UP_AND_RIGHT = "\u255a"
BOX_DRAWINGS_UP_SINGLE_AND_LEFT_DOUBLE = "\u255b"
BOX_DRAWINGS_UP_DOUBLE_AND_LEFT_SINGLE = "\u255c"
BOX_DRAWINGS_DOUBLE_UP_AND_LEFT = "\u255d"
BOX_DRAWINGS_VERTICAL_SINGLE_AND_RIGHT_DOUBLE = "\u255e"
BOX_DRAWINGS_VERTICAL_DOUBLE_AND_RIGHT_SINGLE = "\u255f"
BOX_DRAWINGS_DOUBLE_VERTICAL_AND_RIGHT = "\u2560"
BOX_DRAWINGS_VERTICAL_SINGLE_AND_LEFT_DOUBLE = "\u2561"
BOX_DRAWINGS_VERTICAL_DOUBLE_AND_LEFT_SINGLE = "\u2562"
BOX_DRAWINGS_DOUBLE_VERTICAL_AND_LEFT = "\u2563"
BOX_DRAWINGS_DOWN_SINGLE_AND_HORIZONTAL_DOUBLE = "\u2564"
BOX_DRAWINGS_DOWN_DOUBLE_AND_HORIZONTAL_SINGLE = "\u2565"
BOX_DRAWINGS_DOUBLE_DOWN_AND_HORIZONTAL = "\u2566"
BOX_DRAWINGS_UP_SINGLE_AND_HORIZONTAL_DOUBLE = "\u2567"
BOX_DRAWINGS_UP_DOUBLE_AND_HORIZONTAL_SINGLE = "\u2568"
BOX_DRAWINGS_DOUBLE_UP_AND_HORIZONTAL = "\u2569"
BOX_DRAWINGS_VERTICAL_SINGLE_AND_HORIZONTAL_DOUBLE = "\u256a"
BOX_DRAWINGS_VERTICAL_DOUBLE_AND_HORIZONTAL_SINGLE = "\u256b"
BOX_DRAWINGS_DOUBLE_VERTICAL_AND_HORIZONTAL = "\u256c"
BOX_DRAWINGS_LIGHT_ARC_DOWN_AND_RIGHT = "\u256d"
BOX_DRAWINGS_LIGHT_ARC_DOWN_AND_LEFT = "\u256e"
BOX_DRAWINGS_LIGHT_ARC_UP_AND_LEFT = "\u256f"
BOX_DRAWINGS_LIGHT_ARC_UP_AND_RIGHT = "\u2570"
BOX_DRAWINGS_LIGHT_DIAGONAL_UPPER_RIGHT_TO_LOWER_LEFT = "\u2571"
BOX_DRAWINGS_LIGHT_DIAGONAL_UPPER_LEFT_TO_LOWER_RIGHT = "\u2572"
BOX_DRAWINGS_LIGHT_DIAGONAL_CROSS = "\u2573"
BOX_DRAWINGS_LIGHT_LEFT = "\u2574"
BOX_DRAWINGS_LIGHT_UP = "\u2575"
BOX_DRAWINGS_LIGHT_RIGHT = "\u2576"
BOX_DRAWINGS_LIGHT_DOWN = "\u2577"
BOX_DRAWINGS_HEAVY_LEFT = "\u2578"
BOX_DRAWINGS_HEAVY_UP = "\u2579"
BOX_DRAWINGS_HEAVY_RIGHT = "\u257a"
BOX_DRAWINGS_HEAVY_DOWN = "\u257b"
BOX_DRAWINGS_LIGHT_LEFT_AND_HEAVY_RIGHT = "\u257c"
BOX_DRAWINGS_LIGHT_UP_AND_HEAVY_DOWN = "\u257d"
BOX_DRAWINGS_HEAVY_LEFT_AND_LIGHT_RIGHT = "\u257e"
BOX_DRAWINGS_HEAVY_UP_AND_LIGHT_DOWN = "\u257f"

_H = BOX_DRAWINGS_LIGHT_HORIZONTAL
_V = BOX_DRAWINGS_LIGHT_VERTICAL
_DR = BOX_DRAWINGS_LIGHT_DOWN_AND_RIGHT
_DL = BOX_DRAWINGS_LIGHT_DOWN_AND_LEFT
_UR = BOX_DRAWINGS_LIGHT_UP_AND_RIGHT
_UL = BOX_DRAWINGS_LIGHT_UP_AND_LEFT
_VR = BOX_DRAWINGS_LIGHT_VERTICAL_AND_RIGHT
_VL = BOX_DRAWINGS_LIGHT_VERTICAL_AND_LEFT
_DH = BOX_DRAWINGS_LIGHT_DOWN_AND_HORIZONTAL
_UH = BOX_DRAWINGS_LIGHT_UP_AND_HORIZONTAL
_VH = BOX_DRAWINGS_LIGHT_VERTICAL_AND_HORIZONTAL

# How two overlapping line characters combine. Keys are pairs ordered by code
# point, so each combination needs to be listed only once. Only light single
# lines are covered; add entries here to join other line styles.
SEMIGRAPHIC_JOINTS: dict[tuple[str, str], str] = {
    (_H, _V): _VH,
    (_H, _DR): _DH,
    (_H, _DL): _DH,
    (_H, _UR): _UH,
    (_H, _UL): _UH,
    (_H, _VR): _VH,
    (_H, _VL): _VH,
    (_H, _DH): _DH,
    (_H, _UH): _UH,
    (_H, _VH): _VH,
    (_V, _DR): _VR,
    (_V, _DL): _VL,
    (_V, _UR): _VR,
    (_V, _UL): _VL,
    (_V, _VR): _VR,
    (_V, _VL): _VL,
    (_V, _DH): _VH,
    (_V, _UH): _VH,
    (_V, _VH): _VH,
    (_DR, _DL): _DH,
    (_DR, _UR): _VR,
    (_DR, _UL): _VH,
    (_DR, _VR): _VR,
    (_DR, _VL): _VH,
    (_DR, _DH): _DH,
    (_DR, _UH): _VH,
    (_DR, _VH): _VH,
    (_DL, _UR): _VH,
    (_DL, _UL): _VL,
    (_DL, _VR): _VH,
    (_DL, _VL): _VL,
    (_DL, _DH): _DH,
    (_DL, _UH): _VH,
    (_DL, _VH): _VH,
    (_UR, _UL): _UH,
    (_UR, _VR): _VR,
    (_UR, _VL): _VH,
    (_UR, _DH): _VH,
    (_UR, _UH): _UH,
    (_UR, _VH): _VH,
    (_UL, _VR): _VH,
    (_UL, _VL): _VL,
    (_UL, _DH): _VH,
    (_UL, _UH): _UH,
    (_UL, _VH): _VH,
    (_VR, _VL): _VH,
    (_VR, _DH): _VH,
    (_VR, _UH): _VH,
    (_VR, _VH): _VH,
    (_VL, _DH): _VH,
    (_VL, _UH): _VH,
    (_VL, _VH): _VH,
    (_DH, _UH): _VH,
    (_DH, _VH): _VH,
    (_UH, _VH): _VH,
}


def join_semigraphics(previous: str, ch: str) -> str:
    """Return the character that results from drawing ``ch`` over ``previous``.

    Identical characters stay as they are. Pairs without a known joint yield
    the one of the two with the higher code point.
    """
    if ch == previous:
        return ch
    low, high = sorted((previous, ch))
    return SEMIGRAPHIC_JOINTS.get((low, high), high)


def print_joined_semigraphics(screen: Any, x: int, y: int, ch: str, style: Any) -> None:
    """Draw ``ch`` at (x, y), joined with the line character already there."""
    previous = screen.get_content(x, y)[0]
    screen.set_content(x, y, join_semigraphics(previous, ch), style)