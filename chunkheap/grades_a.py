"""Graded allocation scenarios 088 and 098."""

from __future__ import annotations

from chunkheap.check import Scenario


def _keep(index: int, nbytes: int, size: int) -> tuple:
    return ("keep", index, nbytes, size)


def _temp(*pairs: tuple[int, int]) -> tuple:
    return tuple(("temp", index, nbytes) for index, nbytes in pairs)


def _free(*indices: int) -> tuple:
    return tuple(("free", index) for index in indices)


def scenario_088() -> Scenario:
    steps = (
        *_temp((6, 2094), (7, 2516), (8, 2158)),
        _keep(12, 12358, 12368),
        _keep(1, 12370, 12384),
        *_temp((24, 2414), (25, 2143), (26, 2553)),
        _keep(27, 12891, 12904),
        *_temp((66, 2234), (67, 2375), (68, 2108)),
        _keep(10, 12330, 12344),
        _keep(26, 12859, 12872),
        *_temp((63, 2157), (64, 2647), (65, 2304)),
        *_temp((9, 2490), (10, 2386), (11, 2377)),
        *_temp((60, 2444), (61, 2570), (62, 2582)),
        *_temp((69, 2126), (70, 2420), (71, 2242)),
        *_temp((72, 2071), (73, 2477), (74, 2531)),
        *_temp((36, 2616), (37, 2324), (38, 2424)),
        *_temp((18, 2237), (19, 2538), (20, 2100)),
        _keep(6, 12997, 13008),
        *_temp((57, 2630), (58, 2048), (59, 2694)),
        *_temp((30, 2177), (31, 2620), (32, 2454)),
        *_temp((51, 2051), (52, 2492), (53, 2070)),
        *_temp((81, 2318), (82, 2118), (83, 2228)),
        *_temp((33, 2206), (34, 2669), (35, 2505)),
        _keep(22, 12327, 12336),
        *_temp((75, 2650), (76, 2566), (77, 2408)),
        *_temp((21, 2697), (22, 2590), (23, 2481)),
        _keep(23, 12699, 12712),
        *_temp((0, 2681), (1, 2060), (2, 2586)),
        *_temp((27, 2438), (28, 2520), (29, 2683)),
        _keep(16, 12457, 12472),
        _keep(24, 12660, 12672),
        *_temp((39, 2053), (40, 2152), (41, 2076)),
        *_temp((54, 2265), (55, 2227), (56, 2312)),
        *_temp((3, 2257), (4, 2320), (5, 2339)),
        *_temp((48, 2318), (49, 2318), (50, 2197)),
        _keep(18, 12462, 12472),
        *_temp((15, 2655), (16, 2231), (17, 2652)),
        _keep(11, 12886, 12896),
        *_temp((45, 2091), (46, 2474), (47, 2381)),
        *_temp((78, 2588), (79, 2243), (80, 2310)),
        *_temp((12, 2419), (13, 2110), (14, 2524)),
        *_temp((42, 2438), (43, 2695), (44, 2389)),
        *_free(32),
        _keep(15, 12911, 12920),
        _keep(25, 12234, 12248),
        *_free(21),
        _keep(20, 12805, 12816),
        *_free(56, 18, 48, 16, 10, 71, 70, 45),
        _keep(7, 12767, 12776),
        *_free(65, 22, 47, 24, 34, 54, 4, 62, 75, 7),
        _keep(0, 12473, 12488),
        *_free(37, 42, 23),
        _keep(17, 12405, 12416),
        *_free(49, 15, 72, 8),
        _keep(4, 12957, 12968),
        _keep(8, 12042, 12056),
        *_free(26, 82, 57, 55, 17),
        _keep(14, 12850, 12864),
        *_free(50, 25, 69, 46),
        _keep(13, 12405, 12416),
        *_free(64, 83, 12),
        _keep(9, 12694, 12704),
        *_free(38),
        _keep(3, 12695, 12704),
        *_free(77, 51, 41, 80, 59, 11, 30, 74, 44, 73, 14, 35, 20, 31, 66, 68, 67),
        _keep(2, 12827, 12840),
        *_free(13, 33, 52, 5, 36, 58, 29),
        _keep(21, 12962, 12976),
        *_free(43),
        _keep(5, 12308, 12320),
        *_free(1, 19, 81, 76, 27, 28),
        _keep(19, 12325, 12336),
        *_free(40, 78, 0, 79, 6, 3, 63, 61, 39, 53, 2, 9, 60),
        ("coalesce",),
    )
    return Scenario(name="088", steps=steps, free_list_size=10, total_bytes=582664)


def scenario_098() -> Scenario:
    steps = (
        *_temp((45, 2487), (46, 2549), (47, 2260)),
        _keep(21, 12560, 12568),
        *_temp((6, 2477), (7, 2252), (8, 2620)),
        *_temp((3, 2371), (4, 2469), (5, 2250)),
        *_temp((57, 2429), (58, 2192), (59, 2162)),
        *_temp((36, 2157), (37, 2582), (38, 2524)),
        *_temp((9, 2635), (10, 2392), (11, 2620)),
        *_temp((21, 2576), (22, 2083), (23, 2424)),
        *_temp((39, 2054), (40, 2109), (41, 2578)),
        *_temp((69, 2296), (70, 2388), (71, 2056)),
        _keep(20, 12083, 12096),
        _keep(13, 12675, 12688),
        *_temp((63, 2109), (64, 2343), (65, 2487)),
        *_temp((51, 2659), (52, 2363), (53, 2122)),
        *_temp((0, 2193), (1, 2609), (2, 2498)),
        *_temp((78, 2135), (79, 2488), (80, 2523)),
        *_temp((18, 2668), (19, 2285), (20, 2176)),
        _keep(25, 12264, 12272),
        *_temp((75, 2288), (76, 2468), (77, 2360)),
        *_temp((48, 2163), (49, 2158), (50, 2454)),
        _keep(3, 12637, 12648),
        _keep(22, 12821, 12832),
        *_temp((12, 2441), (13, 2697), (14, 2178)),
        *_temp((72, 2667), (73, 2251), (74, 2369)),
        *_temp((42, 2253), (43, 2274), (44, 2407)),
        *_temp((15, 2634), (16, 2281), (17, 2097)),
        _keep(12, 12676, 12688),
        *_temp((24, 2077), (25, 2694), (26, 2611)),
        *_temp((30, 2063), (31, 2225), (32, 2352)),
        _keep(24, 12474, 12488),
        _keep(18, 12412, 12424),
        *_temp((66, 2206), (67, 2072), (68, 2363)),
        *_temp((60, 2375), (61, 2576), (62, 2356)),
        *_temp((54, 2059), (55, 2679), (56, 2077)),
        *_temp((33, 2050), (34, 2426), (35, 2499)),
        _keep(7, 12461, 12472),
        *_temp((27, 2393), (28, 2218), (29, 2232)),
        _keep(0, 12647, 12656),
        *_free(14, 26, 48, 68, 18),
        _keep(4, 12499, 12512),
        *_free(11, 72, 17, 28, 76, 37, 3),
        _keep(15, 12557, 12568),
        _keep(26, 12225, 12240),
        *_free(16, 63, 74),
        _keep(10, 12688, 12696),
        *_free(7, 1, 5, 79, 36, 54, 25),
        _keep(23, 12825, 12840),
        *_free(9, 30, 10, 43),
        _keep(5, 12818, 12832),
        _keep(19, 12763, 12776),
        *_free(67),
        _keep(16, 12623, 12632),
        *_free(41, 38, 78),
        _keep(17, 12051, 12064),
        _keep(9, 12620, 12632),
        *_free(70, 52, 0, 75, 57),
        _keep(8, 12688, 12696),
        *_free(27),
        _keep(2, 12585, 12600),
        *_free(69, 15, 65, 4, 46, 29),
        _keep(11, 12980, 12992),
        *_free(64, 47, 44, 22, 55, 40, 61, 53, 20, 73, 2, 35, 59, 8, 56, 62, 21),
        _keep(1, 12232, 12240),
        *_free(58),
        _keep(6, 12867, 12880),
        *_free(60, 6, 80, 77, 13, 49, 32, 12, 31, 42, 51, 50, 24),
        _keep(14, 12064, 12072),
        *_free(66, 34, 71, 39, 19, 45, 33, 23),
        ("coalesce",),
    )
    return Scenario(name="098", steps=steps, free_list_size=8, total_bytes=560288)