"""Graded allocation scenarios 089 and 090."""

from __future__ import annotations

from chunkheap.check import Scenario


def _keep(index: int, nbytes: int, size: int) -> tuple:
    return ("keep", index, nbytes, size)


def _temp(*pairs: tuple[int, int]) -> tuple:
    return tuple(("temp", index, nbytes) for index, nbytes in pairs)


def _free(*indices: int) -> tuple:
    return tuple(("free", index) for index in indices)


def scenario_089() -> Scenario:
    steps = (
        _keep(10, 12291, 12304),
        *_temp((15, 2534), (16, 2609), (17, 2192)),
        _keep(1, 12347, 12360),
        *_temp((30, 2683), (31, 2635), (32, 2451)),
        *_temp((75, 2207), (76, 2595), (77, 2677)),
        _keep(7, 12608, 12616),
        *_temp((57, 2501), (58, 2189), (59, 2344)),
        *_temp((39, 2333), (40, 2569), (41, 2467)),
        _keep(9, 12015, 12024),
        _keep(12, 12303, 12312),
        *_temp((81, 2619), (82, 2159), (83, 2122)),
        *_temp((0, 2241), (1, 2429), (2, 2314)),
        *_temp((45, 2547), (46, 2466), (47, 2216)),
        _keep(0, 12178, 12192),
        *_temp((9, 2099), (10, 2446), (11, 2436)),
        *_temp((60, 2101), (61, 2365), (62, 2092)),
        *_temp((6, 2425), (7, 2571), (8, 2675)),
        *_temp((72, 2458), (73, 2648), (74, 2687)),
        _keep(27, 12492, 12504),
        *_temp((63, 2296), (64, 2637), (65, 2460)),
        *_temp((66, 2156), (67, 2399), (68, 2554)),
        _keep(11, 12911, 12920),
        _keep(24, 12413, 12424),
        *_temp((69, 2359), (70, 2525), (71, 2357)),
        *_temp((51, 2321), (52, 2285), (53, 2145)),
        _keep(18, 12895, 12904),
        _keep(14, 12827, 12840),
        *_temp((21, 2129), (22, 2248), (23, 2483)),
        *_temp((42, 2540), (43, 2392), (44, 2507)),
        *_temp((36, 2573), (37, 2665), (38, 2690)),
        _keep(20, 12126, 12136),
        *_temp((84, 2234), (85, 2122), (86, 2211)),
        *_temp((27, 2363), (28, 2696), (29, 2303)),
        *_temp((18, 2153), (19, 2591), (20, 2239)),
        _keep(6, 12926, 12936),
        *_temp((24, 2330), (25, 2260), (26, 2137)),
        *_temp((54, 2528), (55, 2101), (56, 2322)),
        *_temp((12, 2229), (13, 2455), (14, 2601)),
        _keep(16, 12210, 12224),
        *_temp((48, 2123), (49, 2616), (50, 2645)),
        *_temp((78, 2506), (79, 2637), (80, 2472)),
        *_temp((33, 2316), (34, 2646), (35, 2358)),
        *_temp((3, 2417), (4, 2442), (5, 2525)),
        _keep(4, 12822, 12832),
        *_free(67),
        _keep(3, 12960, 12968),
        *_free(10),
        _keep(23, 12828, 12840),
        *_free(30, 83, 13, 56, 66, 48, 38, 60, 82, 39, 18, 54),
        _keep(21, 12611, 12624),
        *_free(68, 47),
        _keep(22, 12576, 12584),
        *_free(70),
        _keep(28, 12062, 12072),
        *_free(53, 4, 62, 69, 46, 33, 43, 22, 25, 64, 5, 59, 79),
        _keep(5, 12069, 12080),
        *_free(26, 57, 44, 20, 19, 15, 9, 85, 40),
        _keep(19, 12398, 12408),
        *_free(71, 16, 21, 52, 80, 29, 75, 77, 31, 84, 51, 11, 2, 28, 36, 37, 17),
        _keep(17, 12886, 12896),
        _keep(2, 12836, 12848),
        *_free(63, 8),
        _keep(26, 12244, 12256),
        *_free(34, 61),
        _keep(15, 12176, 12184),
        *_free(24, 72, 23, 3, 12),
        _keep(8, 12091, 12104),
        *_free(81, 55, 32, 76, 73, 74, 50, 27, 45, 35, 6, 1, 78, 41, 65, 42, 7, 49),
        _keep(25, 12915, 12928),
        *_free(14),
        _keep(13, 12342, 12352),
        *_free(0, 58, 86),
        ("coalesce",),
    )
    return Scenario(name="089", steps=steps, free_list_size=11, total_bytes=600240)


def scenario_090() -> Scenario:
    steps = (
        _keep(1, 12659, 12672),
        *_temp((48, 2675), (49, 2503), (50, 2136)),
        _keep(15, 12985, 13000),
        _keep(14, 12992, 13000),
        *_temp((81, 2218), (82, 2447), (83, 2446)),
        *_temp((63, 2121), (64, 2480), (65, 2497)),
        *_temp((57, 2078), (58, 2261), (59, 2609)),
        _keep(13, 12135, 12144),
        _keep(5, 12774, 12784),
        *_temp((21, 2547), (22, 2132), (23, 2152)),
        _keep(12, 12100, 12112),
        _keep(24, 12290, 12304),
        *_temp((30, 2065), (31, 2400), (32, 2578)),
        _keep(23, 12245, 12256),
        *_temp((42, 2137), (43, 2068), (44, 2218)),
        _keep(18, 12435, 12448),
        _keep(20, 12610, 12624),
        _keep(27, 12292, 12304),
        _keep(25, 12403, 12416),
        *_temp((18, 2610), (19, 2187), (20, 2202)),
        *_temp((78, 2312), (79, 2475), (80, 2229)),
        *_temp((3, 2466), (4, 2493), (5, 2378)),
        _keep(9, 12175, 12184),
        *_temp((15, 2686), (16, 2588), (17, 2137)),
        _keep(22, 12701, 12712),
        *_temp((39, 2097), (40, 2491), (41, 2294)),
        *_temp((12, 2614), (13, 2419), (14, 2524)),
        *_temp((9, 2608), (10, 2482), (11, 2345)),
        *_temp((33, 2465), (34, 2064), (35, 2206)),
        *_temp((51, 2238), (52, 2067), (53, 2347)),
        *_temp((84, 2049), (85, 2598), (86, 2565)),
        *_temp((24, 2097), (25, 2115), (26, 2064)),
        _keep(2, 12841, 12856),
        *_temp((27, 2609), (28, 2378), (29, 2509)),
        *_temp((75, 2678), (76, 2364), (77, 2243)),
        *_temp((66, 2373), (67, 2545), (68, 2289)),
        *_temp((72, 2448), (73, 2057), (74, 2312)),
        *_temp((45, 2257), (46, 2508), (47, 2204)),
        _keep(3, 12417, 12432),
        _keep(4, 12930, 12944),
        *_temp((6, 2380), (7, 2128), (8, 2137)),
        *_temp((0, 2657), (1, 2676), (2, 2145)),
        *_temp((60, 2191), (61, 2255), (62, 2398)),
        *_temp((36, 2050), (37, 2134), (38, 2428)),
        _keep(16, 12087, 12096),
        _keep(10, 12096, 12104),
        *_temp((69, 2653), (70, 2668), (71, 2220)),
        *_temp((54, 2676), (55, 2321), (56, 2145)),
        *_free(0, 20),
        _keep(11, 12248, 12256),
        *_free(15, 55, 29, 21, 14, 11, 49, 67, 43, 7, 52, 65),
        _keep(19, 12110, 12120),
        *_free(
            57, 63, 17, 13, 10, 31, 12, 72, 1, 35, 79, 19, 70,
            85, 75, 33, 59, 83, 73, 40, 78, 71, 76, 82, 23,
        ),
        _keep(26, 12113, 12128),
        *_free(80, 3, 4, 45, 56, 47, 53, 68, 86),
        _keep(7, 12352, 12360),
        *_free(9, 2, 6, 58, 41, 60, 44, 8),
        _keep(0, 12031, 12040),
        *_free(34, 37, 30, 50, 26, 39, 66, 18, 27, 5),
        _keep(6, 12890, 12904),
        *_free(36, 38, 25, 32),
        _keep(21, 12788, 12800),
        *_free(46),
        _keep(17, 12303, 12312),
        *_free(69, 24, 22, 84, 61, 81),
        _keep(8, 12791, 12800),
        *_free(62, 51, 74),
        _keep(28, 12603, 12616),
        *_free(48, 64, 77, 28, 16, 54, 42),
        ("coalesce",),
    )
    return Scenario(name="090", steps=steps, free_list_size=11, total_bytes=599296)