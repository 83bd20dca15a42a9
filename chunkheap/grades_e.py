"""Graded allocation scenarios 095 and 096."""

from __future__ import annotations

from chunkheap.check import Scenario


def _keep(index: int, nbytes: int, size: int) -> tuple:
    return ("keep", index, nbytes, size)


def _temp(*pairs: tuple[int, int]) -> tuple:
    return tuple(("temp", index, nbytes) for index, nbytes in pairs)


def _free(*indices: int) -> tuple:
    return tuple(("free", index) for index in indices)


def scenario_095() -> Scenario:
    steps = (
        _keep(19, 12329, 12344),
        *_temp((18, 2360), (19, 2621), (20, 2693)),
        *_temp((57, 2696), (58, 2250), (59, 2542)),
        *_temp((87, 2524), (88, 2386), (89, 2578)),
        *_temp((12, 2212), (13, 2055), (14, 2158)),
        _keep(15, 12484, 12496),
        *_temp((51, 2062), (52, 2266), (53, 2294)),
        *_temp((54, 2336), (55, 2378), (56, 2508)),
        *_temp((66, 2122), (67, 2638), (68, 2186)),
        *_temp((81, 2238), (82, 2441), (83, 2659)),
        *_temp((45, 2109), (46, 2139), (47, 2691)),
        _keep(28, 12142, 12152),
        *_temp((72, 2410), (73, 2659), (74, 2099)),
        *_temp((75, 2275), (76, 2240), (77, 2241)),
        *_temp((3, 2150), (4, 2137), (5, 2208)),
        *_temp((9, 2693), (10, 2446), (11, 2303)),
        *_temp((84, 2211), (85, 2098), (86, 2480)),
        *_temp((39, 2674), (40, 2557), (41, 2100)),
        *_temp((48, 2462), (49, 2321), (50, 2232)),
        _keep(7, 12523, 12536),
        _keep(10, 12923, 12936),
        _keep(6, 12325, 12336),
        _keep(9, 12138, 12152),
        _keep(12, 12935, 12944),
        *_temp((36, 2205), (37, 2155), (38, 2194)),
        _keep(0, 12442, 12456),
        _keep(22, 12448, 12456),
        *_temp((69, 2217), (70, 2691), (71, 2471)),
        *_temp((30, 2291), (31, 2697), (32, 2453)),
        _keep(2, 12220, 12232),
        *_temp((6, 2063), (7, 2162), (8, 2279)),
        *_temp((42, 2075), (43, 2439), (44, 2604)),
        *_temp((21, 2087), (22, 2111), (23, 2060)),
        *_temp((24, 2536), (25, 2265), (26, 2598)),
        *_temp((15, 2463), (16, 2454), (17, 2598)),
        _keep(27, 12743, 12752),
        *_temp((60, 2248), (61, 2281), (62, 2694)),
        *_temp((27, 2419), (28, 2450), (29, 2187)),
        *_temp((33, 2483), (34, 2599), (35, 2513)),
        _keep(17, 12802, 12816),
        *_temp((63, 2181), (64, 2058), (65, 2551)),
        _keep(20, 12925, 12936),
        _keep(29, 12552, 12560),
        _keep(5, 12353, 12368),
        *_temp((78, 2154), (79, 2068), (80, 2437)),
        *_temp((0, 2205), (1, 2422), (2, 2598)),
        *_free(73, 39, 83),
        _keep(8, 12938, 12952),
        *_free(70, 77, 21, 61, 36, 44, 75),
        _keep(25, 12094, 12104),
        *_free(64, 15, 58, 40, 3, 45, 82, 54, 43, 56, 5, 29, 66, 17, 81),
        _keep(16, 12994, 13008),
        _keep(24, 12845, 12856),
        *_free(89, 31, 37, 13, 62, 26, 60),
        _keep(3, 12564, 12576),
        *_free(55, 4),
        _keep(14, 12275, 12288),
        _keep(18, 12086, 12096),
        *_free(41, 87, 49, 80, 74, 42, 71, 52, 27, 32, 46),
        _keep(11, 12619, 12632),
        *_free(22, 14, 79, 38, 53, 12, 18, 63),
        _keep(13, 12946, 12960),
        *_free(84, 50, 48),
        _keep(23, 12632, 12640),
        *_free(9),
        _keep(4, 12525, 12536),
        *_free(
            23, 67, 24, 69, 59, 51, 76, 78, 30, 19, 47,
            7, 35, 57, 33, 25, 88, 28, 0, 20, 8,
        ),
        _keep(1, 12590, 12600),
        *_free(10, 11),
        _keep(26, 12972, 12984),
        *_free(6, 72, 16, 1, 68, 65, 34),
        _keep(21, 12087, 12096),
        *_free(85, 86, 2),
        ("coalesce",),
    )
    return Scenario(name="095", steps=steps, free_list_size=9, total_bytes=622560)


def scenario_096() -> Scenario:
    steps = (
        _keep(0, 12294, 12304),
        *_temp((33, 2448), (34, 2158), (35, 2678)),
        *_temp((21, 2429), (22, 2617), (23, 2446)),
        *_temp((60, 2588), (61, 2187), (62, 2326)),
        _keep(11, 12955, 12968),
        *_temp((3, 2637), (4, 2084), (5, 2669)),
        *_temp((39, 2385), (40, 2251), (41, 2251)),
        *_temp((63, 2092), (64, 2331), (65, 2139)),
        *_temp((0, 2252), (1, 2564), (2, 2099)),
        *_temp((15, 2398), (16, 2065), (17, 2604)),
        _keep(15, 12292, 12304),
        *_temp((48, 2461), (49, 2060), (50, 2191)),
        *_temp((81, 2116), (82, 2228), (83, 2239)),
        *_temp((27, 2657), (28, 2452), (29, 2584)),
        *_temp((54, 2198), (55, 2151), (56, 2363)),
        *_temp((51, 2469), (52, 2539), (53, 2326)),
        *_temp((57, 2516), (58, 2280), (59, 2377)),
        *_temp((69, 2553), (70, 2057), (71, 2447)),
        *_temp((78, 2474), (79, 2153), (80, 2586)),
        _keep(12, 12731, 12744),
        *_temp((18, 2583), (19, 2431), (20, 2128)),
        *_temp((87, 2334), (88, 2591), (89, 2352)),
        _keep(30, 12853, 12864),
        *_temp((90, 2243), (91, 2060), (92, 2197)),
        *_temp((12, 2627), (13, 2607), (14, 2631)),
        *_temp((75, 2457), (76, 2322), (77, 2575)),
        _keep(21, 12911, 12920),
        *_temp((84, 2453), (85, 2345), (86, 2675)),
        *_temp((42, 2151), (43, 2134), (44, 2200)),
        _keep(20, 12762, 12776),
        *_temp((72, 2283), (73, 2193), (74, 2081)),
        *_temp((9, 2354), (10, 2192), (11, 2109)),
        *_temp((66, 2370), (67, 2063), (68, 2358)),
        _keep(9, 12299, 12312),
        *_temp((24, 2189), (25, 2096), (26, 2606)),
        *_temp((30, 2175), (31, 2348), (32, 2631)),
        _keep(14, 12087, 12096),
        _keep(23, 12696, 12704),
        *_temp((6, 2275), (7, 2250), (8, 2624)),
        *_temp((45, 2128), (46, 2310), (47, 2538)),
        _keep(27, 12544, 12552),
        *_temp((36, 2544), (37, 2317), (38, 2410)),
        *_free(0, 36, 66),
        _keep(28, 12682, 12696),
        *_free(53),
        _keep(3, 12372, 12384),
        *_free(62, 46, 34),
        _keep(24, 12721, 12736),
        *_free(88, 57),
        _keep(17, 12218, 12232),
        *_free(29, 76, 10),
        _keep(29, 12969, 12984),
        *_free(61, 79),
        _keep(18, 12627, 12640),
        *_free(21, 83, 24, 7, 4, 72, 68),
        _keep(8, 12639, 12648),
        *_free(56, 75, 65, 14, 82),
        _keep(16, 12870, 12880),
        *_free(73, 17, 52, 48, 85, 8, 31, 30, 2, 19, 18),
        _keep(10, 12727, 12736),
        *_free(50, 42, 33, 63, 71, 22),
        _keep(4, 12634, 12648),
        *_free(81, 43, 12, 23, 27, 44, 25, 90, 78, 9, 32, 86, 20, 5, 40, 77, 15),
        _keep(25, 12935, 12944),
        *_free(84, 74, 38),
        _keep(2, 12576, 12584),
        *_free(64),
        _keep(6, 12290, 12304),
        *_free(37, 16),
        _keep(26, 12840, 12848),
        *_free(70, 26, 11, 92, 59, 60, 58, 41, 3, 51, 89, 54, 45, 35),
        _keep(5, 12057, 12072),
        _keep(19, 12690, 12704),
        *_free(6),
        _keep(13, 12738, 12752),
        *_free(80, 28),
        _keep(1, 12255, 12264),
        *_free(39, 13),
        _keep(22, 12572, 12584),
        *_free(49),
        _keep(7, 12620, 12632),
        *_free(69, 1, 87, 67, 91, 47, 55),
        ("coalesce",),
    )
    return Scenario(name="096", steps=steps, free_list_size=10, total_bytes=644768)