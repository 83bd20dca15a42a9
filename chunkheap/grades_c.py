"""Graded allocation scenarios 091 and 093."""

from __future__ import annotations

from chunkheap.check import Scenario


def _keep(index: int, nbytes: int, size: int) -> tuple:
    return ("keep", index, nbytes, size)


def _temp(*pairs: tuple[int, int]) -> tuple:
    return tuple(("temp", index, nbytes) for index, nbytes in pairs)


def _free(*indices: int) -> tuple:
    return tuple(("free", index) for index in indices)


def scenario_091() -> Scenario:
    steps = (
        _keep(1, 12324, 12336),
        _keep(17, 12719, 12728),
        *_temp((39, 2414), (40, 2122), (41, 2642)),
        *_temp((54, 2540), (55, 2617), (56, 2344)),
        _keep(24, 12814, 12824),
        *_temp((78, 2314), (79, 2635), (80, 2560)),
        _keep(8, 12140, 12152),
        _keep(20, 12447, 12456),
        *_temp((87, 2330), (88, 2641), (89, 2514)),
        *_temp((72, 2117), (73, 2586), (74, 2282)),
        _keep(18, 12328, 12336),
        *_temp((42, 2395), (43, 2580), (44, 2353)),
        _keep(29, 12174, 12184),
        *_temp((57, 2334), (58, 2223), (59, 2549)),
        *_temp((0, 2272), (1, 2623), (2, 2119)),
        _keep(12, 12248, 12256),
        *_temp((81, 2088), (82, 2121), (83, 2217)),
        *_temp((84, 2427), (85, 2272), (86, 2508)),
        *_temp((48, 2387), (49, 2274), (50, 2437)),
        *_temp((30, 2166), (31, 2056), (32, 2329)),
        *_temp((36, 2254), (37, 2167), (38, 2240)),
        _keep(15, 12793, 12808),
        *_temp((27, 2059), (28, 2066), (29, 2165)),
        *_temp((66, 2692), (67, 2671), (68, 2150)),
        _keep(13, 12927, 12936),
        *_temp((3, 2543), (4, 2228), (5, 2181)),
        _keep(27, 12093, 12104),
        *_temp((15, 2568), (16, 2081), (17, 2662)),
        *_temp((63, 2322), (64, 2531), (65, 2350)),
        _keep(21, 12612, 12624),
        _keep(3, 12225, 12240),
        _keep(4, 12687, 12696),
        _keep(28, 12143, 12152),
        *_temp((6, 2332), (7, 2250), (8, 2431)),
        *_temp((12, 2386), (13, 2444), (14, 2520)),
        *_temp((24, 2617), (25, 2638), (26, 2505)),
        *_temp((18, 2432), (19, 2162), (20, 2052)),
        *_temp((9, 2517), (10, 2253), (11, 2217)),
        *_temp((69, 2158), (70, 2082), (71, 2582)),
        _keep(9, 12336, 12344),
        _keep(25, 12244, 12256),
        *_temp((45, 2549), (46, 2193), (47, 2643)),
        *_temp((60, 2146), (61, 2053), (62, 2636)),
        *_temp((51, 2500), (52, 2550), (53, 2370)),
        *_temp((75, 2132), (76, 2460), (77, 2493)),
        _keep(6, 12855, 12864),
        _keep(16, 12963, 12976),
        *_temp((21, 2667), (22, 2470), (23, 2520)),
        _keep(5, 12478, 12488),
        *_temp((33, 2135), (34, 2055), (35, 2335)),
        *_free(29, 75, 30, 62),
        _keep(19, 12471, 12480),
        *_free(89, 32),
        _keep(7, 12449, 12464),
        *_free(42, 22, 25, 17, 73, 85, 60, 71),
        _keep(0, 12531, 12544),
        _keep(26, 12981, 12992),
        *_free(
            18, 38, 26, 56, 78, 84, 4, 2, 88, 47, 44, 50, 24, 58, 39, 70, 13, 5,
            57, 66, 69, 86, 8, 27, 45, 21, 35, 41, 20, 40, 48, 76, 54, 12, 14, 79,
        ),
        _keep(23, 12309, 12320),
        *_free(9, 6, 15, 64, 37, 63, 77, 59),
        _keep(14, 12804, 12816),
        *_free(80, 61, 53),
        _keep(2, 12845, 12856),
        *_free(82, 19, 1, 49, 7, 0, 81, 33, 28, 34, 23, 87, 83, 36, 10, 3),
        _keep(11, 12584, 12592),
        *_free(68, 46),
        _keep(10, 12900, 12912),
        *_free(52, 16, 11),
        _keep(22, 12825, 12840),
        *_free(31, 67, 43, 74, 65, 72, 51, 55),
        ("coalesce",),
    )
    return Scenario(name="091", steps=steps, free_list_size=13, total_bytes=622336)


def scenario_093() -> Scenario:
    steps = (
        *_temp((15, 2490), (16, 2525), (17, 2620)),
        _keep(7, 12938, 12952),
        _keep(3, 12490, 12504),
        *_temp((3, 2611), (4, 2646), (5, 2581)),
        _keep(0, 12236, 12248),
        *_temp((78, 2382), (79, 2639), (80, 2148)),
        _keep(28, 12872, 12880),
        *_temp((72, 2422), (73, 2234), (74, 2485)),
        _keep(4, 12904, 12912),
        *_temp((21, 2507), (22, 2436), (23, 2455)),
        *_temp((57, 2105), (58, 2479), (59, 2104)),
        _keep(12, 12193, 12208),
        *_temp((42, 2226), (43, 2396), (44, 2653)),
        _keep(17, 12552, 12560),
        *_temp((33, 2258), (34, 2274), (35, 2402)),
        _keep(8, 12541, 12552),
        *_temp((45, 2691), (46, 2634), (47, 2172)),
        *_temp((24, 2052), (25, 2324), (26, 2489)),
        *_temp((48, 2385), (49, 2156), (50, 2553)),
        *_temp((63, 2242), (64, 2655), (65, 2602)),
        *_temp((69, 2237), (70, 2443), (71, 2455)),
        _keep(22, 12074, 12088),
        *_temp((75, 2137), (76, 2319), (77, 2243)),
        *_temp((84, 2144), (85, 2080), (86, 2333)),
        _keep(5, 12887, 12896),
        _keep(27, 12342, 12352),
        *_temp((54, 2478), (55, 2329), (56, 2260)),
        _keep(19, 12544, 12552),
        *_temp((6, 2243), (7, 2095), (8, 2475)),
        _keep(26, 12366, 12376),
        *_temp((9, 2177), (10, 2588), (11, 2070)),
        _keep(14, 12133, 12144),
        *_temp((27, 2051), (28, 2074), (29, 2481)),
        *_temp((0, 2605), (1, 2115), (2, 2282)),
        *_temp((12, 2469), (13, 2315), (14, 2289)),
        *_temp((60, 2463), (61, 2577), (62, 2664)),
        *_temp((81, 2319), (82, 2667), (83, 2118)),
        *_temp((30, 2161), (31, 2345), (32, 2313)),
        *_temp((36, 2423), (37, 2493), (38, 2292)),
        *_temp((39, 2691), (40, 2259), (41, 2425)),
        *_temp((18, 2681), (19, 2275), (20, 2087)),
        _keep(13, 12864, 12872),
        *_temp((51, 2631), (52, 2065), (53, 2307)),
        *_temp((66, 2370), (67, 2335), (68, 2138)),
        *_free(6, 79, 11, 63, 32, 38, 5, 7),
        _keep(16, 12364, 12376),
        *_free(21),
        _keep(15, 12410, 12424),
        *_free(84, 9, 15, 17, 55),
        _keep(6, 12432, 12440),
        *_free(73, 65, 40, 51, 28, 71, 42, 24, 59, 76, 83, 0, 25),
        _keep(11, 12257, 12272),
        *_free(86, 82, 4, 36, 77, 60, 44, 23, 22, 81, 33, 74, 52, 53, 46, 80, 47),
        _keep(9, 12657, 12672),
        *_free(70, 31, 69, 50, 16, 1, 45, 54, 61, 68, 48),
        _keep(2, 12206, 12216),
        *_free(35, 39),
        _keep(20, 12768, 12776),
        _keep(10, 12509, 12520),
        *_free(14, 67, 58, 27, 8, 57, 3),
        _keep(24, 12567, 12576),
        _keep(25, 12925, 12936),
        *_free(18, 34, 64, 30, 26, 2, 43),
        _keep(18, 12761, 12776),
        *_free(75, 12, 66, 78, 37, 20, 41, 13, 49),
        _keep(21, 12261, 12272),
        *_free(56, 72, 19),
        _keep(23, 12438, 12448),
        *_free(10),
        _keep(1, 12301, 12312),
        *_free(85, 29, 62),
        ("coalesce",),
    )
    return Scenario(name="093", steps=steps, free_list_size=14, total_bytes=600680)