"""Graded allocation scenarios 092 and 094."""

from __future__ import annotations

from chunkheap.check import Scenario


def _keep(index: int, nbytes: int, size: int) -> tuple:
    return ("keep", index, nbytes, size)


def _temp(*pairs: tuple[int, int]) -> tuple:
    return tuple(("temp", index, nbytes) for index, nbytes in pairs)


def _free(*indices: int) -> tuple:
    return tuple(("free", index) for index in indices)


def scenario_092() -> Scenario:
    steps = (
        _keep(18, 12868, 12880),
        *_temp((36, 2375), (37, 2553), (38, 2360)),
        _keep(6, 12467, 12480),
        *_temp((27, 2391), (28, 2272), (29, 2429)),
        *_temp((15, 2547), (16, 2676), (17, 2128)),
        *_temp((21, 2551), (22, 2137), (23, 2428)),
        *_temp((39, 2336), (40, 2599), (41, 2144)),
        *_temp((63, 2163), (64, 2566), (65, 2131)),
        *_temp((33, 2205), (34, 2553), (35, 2629)),
        _keep(17, 12136, 12144),
        *_temp((3, 2596), (4, 2081), (5, 2056)),
        *_temp((78, 2150), (79, 2392), (80, 2275)),
        _keep(3, 12034, 12048),
        _keep(8, 12840, 12848),
        *_temp((9, 2553), (10, 2162), (11, 2105)),
        *_temp((87, 2368), (88, 2590), (89, 2526)),
        _keep(12, 12045, 12056),
        *_temp((84, 2253), (85, 2626), (86, 2372)),
        _keep(29, 12590, 12600),
        *_temp((75, 2551), (76, 2676), (77, 2571)),
        *_temp((69, 2301), (70, 2593), (71, 2171)),
        _keep(4, 12795, 12808),
        *_temp((30, 2581), (31, 2185), (32, 2223)),
        *_temp((18, 2678), (19, 2125), (20, 2441)),
        *_temp((12, 2350), (13, 2367), (14, 2318)),
        *_temp((60, 2686), (61, 2359), (62, 2128)),
        _keep(27, 12541, 12552),
        _keep(11, 12921, 12936),
        _keep(7, 12193, 12208),
        _keep(2, 12202, 12216),
        _keep(0, 12384, 12392),
        _keep(13, 12072, 12080),
        *_temp((81, 2378), (82, 2443), (83, 2435)),
        *_temp((51, 2282), (52, 2104), (53, 2614)),
        _keep(23, 12374, 12384),
        *_temp((45, 2591), (46, 2183), (47, 2261)),
        _keep(15, 12602, 12616),
        *_temp((24, 2472), (25, 2563), (26, 2654)),
        *_temp((48, 2272), (49, 2413), (50, 2266)),
        _keep(10, 12705, 12720),
        *_temp((57, 2406), (58, 2490), (59, 2288)),
        _keep(19, 12183, 12192),
        *_temp((42, 2071), (43, 2293), (44, 2534)),
        *_temp((54, 2110), (55, 2438), (56, 2636)),
        _keep(26, 12850, 12864),
        *_temp((6, 2539), (7, 2362), (8, 2401)),
        *_temp((66, 2188), (67, 2406), (68, 2676)),
        *_temp((0, 2519), (1, 2454), (2, 2086)),
        *_temp((72, 2176), (73, 2211), (74, 2375)),
        *_free(83, 81),
        _keep(16, 12840, 12848),
        *_free(15, 57, 18, 3, 87, 84, 11, 78, 0),
        _keep(14, 12969, 12984),
        *_free(40, 43),
        _keep(9, 12496, 12504),
        *_free(63, 52, 46, 2, 34),
        _keep(21, 12437, 12448),
        _keep(22, 12950, 12960),
        *_free(38, 39, 67, 70, 58, 19),
        _keep(25, 12084, 12096),
        *_free(5, 73, 37, 61, 28, 88, 80, 60, 26, 10, 71),
        _keep(28, 12332, 12344),
        *_free(
            53, 69, 25, 55, 79, 16, 13, 23, 66, 17, 65, 47, 50, 72, 41, 59, 49, 44, 75,
            4, 29, 48, 77, 8, 35, 12, 86, 85, 7, 9, 1, 51, 33, 30, 22, 54, 6, 24,
        ),
        _keep(5, 12183, 12192),
        *_free(27, 74, 36, 64, 68, 62, 14),
        _keep(20, 12283, 12296),
        *_free(89, 76, 20),
        _keep(24, 12691, 12704),
        *_free(21, 42, 45, 32, 82, 31),
        _keep(1, 12636, 12648),
        *_free(56),
        ("coalesce",),
    )
    return Scenario(name="092", steps=steps, free_list_size=13, total_bytes=620808)


def scenario_094() -> Scenario:
    steps = (
        *_temp((69, 2076), (70, 2180), (71, 2232)),
        *_temp((48, 2577), (49, 2182), (50, 2401)),
        *_temp((15, 2482), (16, 2509), (17, 2480)),
        *_temp((27, 2087), (28, 2244), (29, 2573)),
        _keep(9, 12978, 12992),
        _keep(26, 12103, 12112),
        _keep(5, 12648, 12656),
        _keep(19, 12617, 12632),
        *_temp((60, 2358), (61, 2625), (62, 2554)),
        *_temp((0, 2608), (1, 2591), (2, 2633)),
        *_temp((63, 2338), (64, 2671), (65, 2122)),
        *_temp((51, 2280), (52, 2064), (53, 2050)),
        *_temp((39, 2102), (40, 2080), (41, 2598)),
        *_temp((18, 2116), (19, 2660), (20, 2304)),
        *_temp((45, 2067), (46, 2149), (47, 2421)),
        *_temp((54, 2118), (55, 2555), (56, 2216)),
        _keep(23, 12567, 12576),
        *_temp((84, 2385), (85, 2392), (86, 2616)),
        *_temp((6, 2506), (7, 2050), (8, 2309)),
        *_temp((12, 2246), (13, 2132), (14, 2362)),
        _keep(12, 12786, 12800),
        *_temp((21, 2203), (22, 2442), (23, 2152)),
        *_temp((72, 2351), (73, 2384), (74, 2656)),
        *_temp((57, 2624), (58, 2635), (59, 2153)),
        *_temp((30, 2526), (31, 2568), (32, 2559)),
        *_temp((3, 2099), (4, 2284), (5, 2333)),
        _keep(25, 12254, 12264),
        *_temp((66, 2626), (67, 2255), (68, 2308)),
        *_temp((24, 2683), (25, 2340), (26, 2449)),
        *_temp((33, 2415), (34, 2101), (35, 2217)),
        _keep(11, 12282, 12296),
        _keep(27, 12943, 12952),
        _keep(17, 12385, 12400),
        *_temp((78, 2316), (79, 2311), (80, 2072)),
        _keep(29, 12488, 12496),
        _keep(8, 12590, 12600),
        *_temp((75, 2506), (76, 2674), (77, 2161)),
        *_temp((81, 2598), (82, 2117), (83, 2441)),
        *_temp((9, 2659), (10, 2537), (11, 2417)),
        *_temp((36, 2084), (37, 2419), (38, 2074)),
        *_temp((87, 2486), (88, 2437), (89, 2566)),
        *_temp((42, 2399), (43, 2078), (44, 2423)),
        _keep(7, 12779, 12792),
        *_free(30, 36, 27, 2, 87, 66, 60, 26),
        _keep(0, 12589, 12600),
        *_free(39, 70, 14, 13, 52, 57, 46, 19, 71, 58, 41),
        _keep(16, 12117, 12128),
        *_free(31),
        _keep(20, 12441, 12456),
        *_free(24),
        _keep(22, 12323, 12336),
        *_free(5, 28, 10, 76),
        _keep(21, 12910, 12920),
        *_free(67, 12, 16, 72),
        _keep(13, 12801, 12816),
        *_free(61, 50),
        _keep(6, 12361, 12376),
        *_free(65, 20, 48, 56, 40, 89, 9),
        _keep(24, 12320, 12328),
        *_free(85, 0, 62, 49, 47, 38, 25, 75),
        _keep(18, 12194, 12208),
        *_free(79, 21, 74, 35, 37, 34, 42),
        _keep(10, 12118, 12128),
        _keep(3, 12755, 12768),
        *_free(32, 29, 8),
        _keep(28, 12601, 12616),
        *_free(45, 15),
        _keep(2, 12215, 12224),
        *_free(80, 69, 6, 86, 59, 18, 11, 44, 88, 84, 53, 83, 7),
        _keep(14, 12110, 12120),
        _keep(15, 12675, 12688),
        *_free(33, 22, 17, 64, 54, 73),
        _keep(4, 12769, 12784),
        *_free(55, 78, 82, 3, 23, 4, 1),
        _keep(1, 12278, 12288),
        *_free(43, 81, 77, 68, 63, 51),
        ("coalesce",),
    )
    return Scenario(name="094", steps=steps, free_list_size=7, total_bytes=621112)