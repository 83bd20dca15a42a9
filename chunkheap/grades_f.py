"""Graded allocation scenarios 097 and 099."""

from __future__ import annotations

from chunkheap.check import Scenario


def _keep(index: int, nbytes: int, size: int) -> tuple:
    return ("keep", index, nbytes, size)


def _temp(*pairs: tuple[int, int]) -> tuple:
    return tuple(("temp", index, nbytes) for index, nbytes in pairs)


def _free(*indices: int) -> tuple:
    return tuple(("free", index) for index in indices)


def scenario_097() -> Scenario:
    steps = (
        _keep(25, 12423, 12432),
        *_temp((84, 2159), (85, 2209), (86, 2530)),
        _keep(13, 12531, 12544),
        *_temp((18, 2546), (19, 2168), (20, 2415)),
        _keep(23, 12761, 12776),
        *_temp((6, 2387), (7, 2218), (8, 2271)),
        *_temp((45, 2116), (46, 2580), (47, 2260)),
        *_temp((69, 2416), (70, 2296), (71, 2464)),
        *_temp((39, 2212), (40, 2401), (41, 2069)),
        *_temp((12, 2548), (13, 2405), (14, 2697)),
        *_temp((54, 2671), (55, 2443), (56, 2526)),
        *_temp((33, 2296), (34, 2454), (35, 2477)),
        *_temp((24, 2116), (25, 2245), (26, 2347)),
        *_temp((27, 2213), (28, 2066), (29, 2199)),
        *_temp((48, 2600), (49, 2539), (50, 2631)),
        *_temp((42, 2514), (43, 2313), (44, 2672)),
        _keep(10, 12532, 12544),
        *_temp((15, 2343), (16, 2183), (17, 2153)),
        *_temp((72, 2558), (73, 2286), (74, 2430)),
        *_temp((81, 2440), (82, 2446), (83, 2307)),
        _keep(14, 12252, 12264),
        _keep(20, 12246, 12256),
        *_temp((3, 2490), (4, 2609), (5, 2449)),
        *_temp((87, 2283), (88, 2603), (89, 2347)),
        *_temp((63, 2127), (64, 2112), (65, 2637)),
        *_temp((75, 2673), (76, 2400), (77, 2433)),
        _keep(2, 12581, 12592),
        _keep(5, 12114, 12128),
        _keep(12, 12528, 12536),
        *_temp((21, 2098), (22, 2525), (23, 2339)),
        *_temp((90, 2143), (91, 2092), (92, 2172)),
        *_temp((0, 2081), (1, 2529), (2, 2208)),
        _keep(6, 12902, 12912),
        *_temp((57, 2131), (58, 2669), (59, 2174)),
        *_temp((60, 2242), (61, 2329), (62, 2494)),
        _keep(3, 12829, 12840),
        _keep(15, 12749, 12760),
        *_temp((66, 2105), (67, 2591), (68, 2080)),
        *_temp((78, 2231), (79, 2518), (80, 2238)),
        *_temp((51, 2673), (52, 2133), (53, 2646)),
        *_temp((30, 2304), (31, 2242), (32, 2439)),
        *_temp((36, 2282), (37, 2437), (38, 2093)),
        _keep(11, 12292, 12304),
        _keep(24, 12598, 12608),
        *_temp((9, 2263), (10, 2078), (11, 2178)),
        _keep(27, 12344, 12352),
        _keep(18, 12519, 12528),
        *_free(18, 67, 92, 65, 51, 57, 16, 0, 45, 52, 87, 27, 23, 11, 9, 84, 3),
        _keep(9, 12459, 12472),
        *_free(4, 49, 15, 56, 64, 73, 32, 31, 76),
        _keep(22, 12697, 12712),
        *_free(54, 22, 44, 48),
        _keep(4, 12742, 12752),
        *_free(47),
        _keep(29, 12385, 12400),
        *_free(13),
        _keep(17, 12635, 12648),
        *_free(26, 5, 10, 34, 20),
        _keep(16, 12747, 12760),
        *_free(72),
        _keep(21, 12736, 12744),
        *_free(46, 66),
        _keep(8, 12339, 12352),
        *_free(50, 30, 60, 38),
        _keep(26, 12357, 12368),
        _keep(7, 12364, 12376),
        *_free(14, 29),
        _keep(30, 12650, 12664),
        *_free(53, 35, 77, 7, 28),
        _keep(0, 12795, 12808),
        *_free(82, 78, 71, 89, 83, 24, 74, 80),
        _keep(19, 12402, 12416),
        *_free(39, 85, 12, 42, 41, 75, 37, 62, 68, 25, 40, 8, 63, 2, 58),
        _keep(28, 12871, 12880),
        *_free(36, 81, 59, 86, 55, 6, 91, 43),
        _keep(1, 12567, 12576),
        *_free(21, 19, 33, 17, 79, 69, 1, 70, 88, 90, 61),
        ("coalesce",),
    )
    return Scenario(name="097", steps=steps, free_list_size=9, total_bytes=643256)


def scenario_099() -> Scenario:
    steps = (
        _keep(30, 12039, 12048),
        *_temp((81, 2114), (82, 2450), (83, 2509)),
        *_temp((66, 2604), (67, 2223), (68, 2546)),
        _keep(6, 12796, 12808),
        _keep(3, 12902, 12912),
        *_temp((63, 2232), (64, 2103), (65, 2181)),
        *_temp((21, 2401), (22, 2249), (23, 2668)),
        _keep(9, 12941, 12952),
        *_temp((72, 2081), (73, 2567), (74, 2173)),
        *_temp((54, 2138), (55, 2673), (56, 2369)),
        *_temp((75, 2673), (76, 2640), (77, 2655)),
        *_temp((3, 2693), (4, 2236), (5, 2447)),
        *_temp((33, 2492), (34, 2692), (35, 2522)),
        *_temp((57, 2276), (58, 2534), (59, 2209)),
        _keep(24, 12875, 12888),
        _keep(18, 12845, 12856),
        *_temp((87, 2130), (88, 2641), (89, 2332)),
        *_temp((24, 2541), (25, 2690), (26, 2218)),
        *_temp((27, 2183), (28, 2210), (29, 2340)),
        *_temp((0, 2220), (1, 2426), (2, 2531)),
        *_temp((48, 2367), (49, 2674), (50, 2649)),
        *_temp((60, 2510), (61, 2103), (62, 2346)),
        *_temp((9, 2640), (10, 2390), (11, 2381)),
        _keep(26, 12962, 12976),
        *_temp((18, 2431), (19, 2683), (20, 2622)),
        _keep(4, 12716, 12728),
        *_temp((36, 2146), (37, 2151), (38, 2444)),
        _keep(12, 12621, 12632),
        *_temp((12, 2315), (13, 2449), (14, 2245)),
        *_temp((39, 2343), (40, 2207), (41, 2175)),
        _keep(13, 12612, 12624),
        *_temp((78, 2152), (79, 2315), (80, 2496)),
        *_temp((6, 2075), (7, 2128), (8, 2512)),
        *_temp((45, 2084), (46, 2090), (47, 2076)),
        *_temp((90, 2497), (91, 2188), (92, 2095)),
        *_temp((51, 2631), (52, 2217), (53, 2314)),
        *_temp((69, 2651), (70, 2357), (71, 2517)),
        *_temp((42, 2299), (43, 2204), (44, 2146)),
        *_temp((30, 2687), (31, 2578), (32, 2515)),
        *_temp((15, 2174), (16, 2535), (17, 2096)),
        _keep(19, 12836, 12848),
        _keep(5, 12227, 12240),
        *_temp((84, 2575), (85, 2453), (86, 2093)),
        *_free(9, 64, 15, 8),
        _keep(14, 12393, 12408),
        *_free(45, 75),
        _keep(10, 12297, 12312),
        *_free(92, 48, 67, 4),
        _keep(11, 12653, 12664),
        *_free(47, 56, 79, 34, 55),
        _keep(27, 12394, 12408),
        *_free(32),
        _keep(22, 12718, 12728),
        *_free(33, 12, 77, 26, 0, 82, 46, 68, 40, 16, 19, 91, 90, 50),
        _keep(25, 12945, 12960),
        *_free(7, 29, 25, 3, 42, 28, 52, 66),
        _keep(21, 12209, 12224),
        *_free(65, 88, 11, 60, 87, 76, 41, 74, 13, 86),
        _keep(16, 12376, 12384),
        *_free(78, 61, 44),
        _keep(2, 12946, 12960),
        *_free(83, 35, 24, 22, 17, 30, 54, 85, 62, 53, 81, 70, 5, 63, 69, 80, 71),
        _keep(29, 12283, 12296),
        _keep(1, 12209, 12224),
        *_free(1),
        _keep(23, 12954, 12968),
        _keep(20, 12404, 12416),
        *_free(58, 20, 31),
        _keep(17, 12884, 12896),
        _keep(15, 12174, 12184),
        _keep(7, 12950, 12960),
        *_free(84, 89, 18, 39, 6, 73, 21, 72, 37, 38),
        _keep(8, 12089, 12104),
        _keep(0, 12000, 12008),
        _keep(28, 12140, 12152),
        *_free(43, 10, 2, 57, 27, 49, 51, 36, 14, 59, 23),
        ("coalesce",),
    )
    return Scenario(name="099", steps=steps, free_list_size=9, total_bytes=643720)