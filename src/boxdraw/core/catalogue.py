"""Recipe catalogue for the Box Drawing and Block Elements blocks.

Each entry is (glyph name, hexadecimal code point, commands). Commands are
calls to drawing primitives in the recipe expression grammar; they are
compiled once by `boxdraw.core.recipes.build_recipe_table` and drawn in
order, later commands over earlier ones.
"""

RecipeEntry = tuple[str, str, tuple[str, ...]]

RECIPES: tuple[RecipeEntry, ...] = (
    # Lines
    ("lighthorzbxd", "2500", ("horBar(boxPen)",)),
    ("heavyhorzbxd", "2501", ("horBar(boxPen, FAT)",)),
    ("lightvertbxd", "2502", ("vertBar(boxPen)",)),
    ("heavyvertbxd", "2503", ("vertBar(boxPen, FAT)",)),
    ("lighttrpldashhorzbxd", "2504", ("dashedHorLine(boxPen, 3)",)),
    ("heavytrpldashhorzbxd", "2505", ("dashedHorLine(boxPen, 3, stroke=FAT_STROKE)",)),
    ("lighttrpldashvertbxd", "2506", ("dashedVertLine(boxPen, 3)",)),
    ("heavytrpldashvertbxd", "2507", ("dashedVertLine(boxPen, 3, stroke=FAT_STROKE)",)),
    ("lightquaddashhorzbxd", "2508", ("dashedHorLine(boxPen, 4)",)),
    ("heavyquaddashhorzbxd", "2509", ("dashedHorLine(boxPen, 4, stroke=FAT_STROKE)",)),
    ("lightquaddashvertbxd", "250A", ("dashedVertLine(boxPen, 4)",)),
    ("heavyquaddashvertbxd", "250B", ("dashedVertLine(boxPen, 4, stroke=FAT_STROKE)",)),
    # Corners
    (
        "lightdnrightbxd",
        "250C",
        ('horHalfBar(boxPen, "right", buttL=STROKE)', 'vertHalfBar(boxPen, "bottom")'),
    ),
    (
        "dnlightrightheavybxd",
        "250D",
        ('horHalfBar(boxPen, "right", FAT, buttL=STROKE)', 'vertHalfBar(boxPen, "bottom")'),
    ),
    (
        "dnheavyrightlightbxd",
        "250E",
        ('horHalfBar(boxPen, "right")', 'vertHalfBar(boxPen, "bottom", FAT, buttT=STROKE)'),
    ),
    (
        "heavydnrightbxd",
        "250F",
        (
            'horHalfBar(boxPen, "right", FAT)',
            'vertHalfBar(boxPen, "bottom", FAT, buttT=FAT_STROKE)',
        ),
    ),
    (
        "lightdnleftbxd",
        "2510",
        ('horHalfBar(boxPen, "left", buttR=STROKE)', 'vertHalfBar(boxPen, "bottom")'),
    ),
    (
        "dnlightleftheavybxd",
        "2511",
        ('horHalfBar(boxPen, "left", FAT, buttR=STROKE)', 'vertHalfBar(boxPen, "bottom")'),
    ),
    (
        "dnheavyleftlightbxd",
        "2512",
        ('horHalfBar(boxPen, "left")', 'vertHalfBar(boxPen, "bottom", FAT, buttT=STROKE)'),
    ),
    (
        "heavydnleftbxd",
        "2513",
        (
            'horHalfBar(boxPen, "left", FAT)',
            'vertHalfBar(boxPen, "bottom", FAT, buttT=FAT_STROKE)',
        ),
    ),
    (
        "lightuprightbxd",
        "2514",
        ('horHalfBar(boxPen, "right", buttL=STROKE)', 'vertHalfBar(boxPen, "top")'),
    ),
    (
        "uplightrightheavybxd",
        "2515",
        ('horHalfBar(boxPen, "right", FAT, buttL=STROKE)', 'vertHalfBar(boxPen, "top")'),
    ),
    (
        "upheavyrightlightbxd",
        "2516",
        ('horHalfBar(boxPen, "right")', 'vertHalfBar(boxPen, "top", FAT, buttB=STROKE)'),
    ),
    (
        "heavyuprightbxd",
        "2517",
        (
            'horHalfBar(boxPen, "right", FAT)',
            'vertHalfBar(boxPen, "top", FAT, buttB=FAT_STROKE)',
        ),
    ),
    (
        "lightupleftbxd",
        "2518",
        ('horHalfBar(boxPen, "left", buttR=STROKE)', 'vertHalfBar(boxPen, "top")'),
    ),
    (
        "uplightleftheavybxd",
        "2519",
        ('horHalfBar(boxPen, "left", FAT, buttR=STROKE)', 'vertHalfBar(boxPen, "top")'),
    ),
    (
        "upheavyleftlightbxd",
        "251A",
        ('horHalfBar(boxPen, "left")', 'vertHalfBar(boxPen, "top", FAT, buttB=STROKE)'),
    ),
    (
        "heavyupleftbxd",
        "251B",
        (
            'horHalfBar(boxPen, "left", FAT)',
            'vertHalfBar(boxPen, "top", FAT, buttB=FAT_STROKE)',
        ),
    ),
    # Tees
    ("lightvertrightbxd", "251C", ('horHalfBar(boxPen, "right")', "vertBar(boxPen)")),
    ("vertlightrightheavybxd", "251D", ('horHalfBar(boxPen, "right", FAT)', "vertBar(boxPen)")),
    (
        "upheavyrightdnlightbxd",
        "251E",
        (
            'horHalfBar(boxPen, "right")',
            'vertHalfBar(boxPen, "top", FAT, buttB=STROKE)',
            'vertHalfBar(boxPen, "bottom")',
        ),
    ),
    (
        "dnheavyrightuplightbxd",
        "251F",
        (
            'horHalfBar(boxPen, "right")',
            'vertHalfBar(boxPen, "top")',
            'vertHalfBar(boxPen, "bottom", FAT, buttT=STROKE)',
        ),
    ),
    ("vertheavyrightlightbxd", "2520", ('horHalfBar(boxPen, "right")', "vertBar(boxPen, FAT)")),
    (
        "dnlightrightupheavybxd",
        "2521",
        (
            'horHalfBar(boxPen, "right", FAT)',
            'vertHalfBar(boxPen, "top", FAT, buttB=FAT_STROKE)',
            'vertHalfBar(boxPen, "bottom")',
        ),
    ),
    (
        "uplightrightdnheavybxd",
        "2522",
        (
            'horHalfBar(boxPen, "right", FAT)',
            'vertHalfBar(boxPen, "top")',
            'vertHalfBar(boxPen, "bottom", FAT, buttT=FAT_STROKE)',
        ),
    ),
    ("heavyvertrightbxd", "2523", ('horHalfBar(boxPen, "right", FAT)', "vertBar(boxPen, FAT)")),
    ("lightvertleftbxd", "2524", ('horHalfBar(boxPen, "left")', "vertBar(boxPen)")),
    ("vertlightleftheavybxd", "2525", ('horHalfBar(boxPen, "left", FAT)', "vertBar(boxPen)")),
    (
        "upheavyleftdnlightbxd",
        "2526",
        (
            'horHalfBar(boxPen, "left")',
            'vertHalfBar(boxPen, "top", FAT, buttB=STROKE)',
            'vertHalfBar(boxPen, "bottom")',
        ),
    ),
    (
        "dnheavyleftuplightbxd",
        "2527",
        (
            'horHalfBar(boxPen, "left")',
            'vertHalfBar(boxPen, "top")',
            'vertHalfBar(boxPen, "bottom", FAT, buttT=STROKE)',
        ),
    ),
    ("vertheavyleftlightbxd", "2528", ('horHalfBar(boxPen, "left")', "vertBar(boxPen, FAT)")),
    (
        "dnlightleftupheavybxd",
        "2529",
        (
            'horHalfBar(boxPen, "left", FAT)',
            'vertHalfBar(boxPen, "top", FAT, buttB=FAT_STROKE)',
            'vertHalfBar(boxPen, "bottom")',
        ),
    ),
    (
        "uplightleftdnheavybxd",
        "252A",
        (
            'horHalfBar(boxPen, "left", FAT)',
            'vertHalfBar(boxPen, "top")',
            'vertHalfBar(boxPen, "bottom", FAT, buttT=FAT_STROKE)',
        ),
    ),
    ("heavyvertleftbxd", "252B", ('horHalfBar(boxPen, "left", FAT)', "vertBar(boxPen, FAT)")),
    ("lightdnhorzbxd", "252C", ("horBar(boxPen)", 'vertHalfBar(boxPen, "bottom")')),
    (
        "leftheavyrightdnlightbxd",
        "252D",
        (
            'horHalfBar(boxPen, "left", FAT, buttR=STROKE)',
            'horHalfBar(boxPen, "right")',
            'vertHalfBar(boxPen, "bottom")',
        ),
    ),
    (
        "rightheavyleftdnlightbxd",
        "252E",
        (
            'horHalfBar(boxPen, "left")',
            'horHalfBar(boxPen, "right", FAT, buttL=STROKE)',
            'vertHalfBar(boxPen, "bottom")',
        ),
    ),
    ("dnlighthorzheavybxd", "252F", ("horBar(boxPen, FAT)", 'vertHalfBar(boxPen, "bottom")')),
    ("dnheavyhorzlightbxd", "2530", ("horBar(boxPen)", 'vertHalfBar(boxPen, "bottom", FAT)')),
    (
        "rightlightleftdnheavybxd",
        "2531",
        (
            'horHalfBar(boxPen, "left", FAT)',
            'horHalfBar(boxPen, "right")',
            'vertHalfBar(boxPen, "bottom", FAT, buttT=FAT_STROKE)',
        ),
    ),
    (
        "leftlightrightdnheavybxd",
        "2532",
        (
            'horHalfBar(boxPen, "left")',
            'horHalfBar(boxPen, "right", FAT)',
            'vertHalfBar(boxPen, "bottom", FAT, buttT=FAT_STROKE)',
        ),
    ),
    ("heavydnhorzbxd", "2533", ("horBar(boxPen, FAT)", 'vertHalfBar(boxPen, "bottom", FAT)')),
    ("lightuphorzbxd", "2534", ("horBar(boxPen)", 'vertHalfBar(boxPen, "top")')),
    (
        "leftheavyrightuplightbxd",
        "2535",
        (
            'horHalfBar(boxPen, "left", FAT, buttR=STROKE)',
            'horHalfBar(boxPen, "right")',
            'vertHalfBar(boxPen, "top")',
        ),
    ),
    (
        "rightheavyleftuplightbxd",
        "2536",
        (
            'horHalfBar(boxPen, "left")',
            'horHalfBar(boxPen, "right", FAT, buttL=STROKE)',
            'vertHalfBar(boxPen, "top")',
        ),
    ),
    ("uplighthorzheavybxd", "2537", ("horBar(boxPen, FAT)", 'vertHalfBar(boxPen, "top")')),
    ("upheavyhorzlightbxd", "2538", ("horBar(boxPen)", 'vertHalfBar(boxPen, "top", FAT)')),
    (
        "rightlightleftupheavybxd",
        "2539",
        (
            'horHalfBar(boxPen, "left", FAT)',
            'horHalfBar(boxPen, "right")',
            'vertHalfBar(boxPen, "top", FAT, buttB=FAT_STROKE)',
        ),
    ),
    (
        "leftlightrightupheavybxd",
        "253A",
        (
            'horHalfBar(boxPen, "left")',
            'horHalfBar(boxPen, "right", FAT)',
            'vertHalfBar(boxPen, "top", FAT, buttB=FAT_STROKE)',
        ),
    ),
    ("heavyuphorzbxd", "253B", ("horBar(boxPen, FAT)", 'vertHalfBar(boxPen, "top", FAT)')),
    # Crosses
    ("lightverthorzbxd", "253C", ("horBar(boxPen)", "vertBar(boxPen)")),
    (
        "leftheavyrightvertlightbxd",
        "253D",
        ('horHalfBar(boxPen, "left", FAT)', 'horHalfBar(boxPen, "right")', "vertBar(boxPen)"),
    ),
    (
        "rightheavyleftvertlightbxd",
        "253E",
        ('horHalfBar(boxPen, "left")', 'horHalfBar(boxPen, "right", FAT)', "vertBar(boxPen)"),
    ),
    ("vertlighthorzheavybxd", "253F", ("horBar(boxPen, FAT)", "vertBar(boxPen)")),
    (
        "upheavydnhorzlightbxd",
        "2540",
        ("horBar(boxPen)", 'vertHalfBar(boxPen, "top", FAT)', 'vertHalfBar(boxPen, "bottom")'),
    ),
    (
        "dnheavyuphorzlightbxd",
        "2541",
        ("horBar(boxPen)", 'vertHalfBar(boxPen, "top")', 'vertHalfBar(boxPen, "bottom", FAT)'),
    ),
    ("vertheavyhorzlightbxd", "2542", ("horBar(boxPen)", "vertBar(boxPen, FAT)")),
    (
        "leftupheavyrightdnlightbxd",
        "2543",
        (
            'horHalfBar(boxPen, "left", FAT, buttR=FAT_STROKE)',
            'horHalfBar(boxPen, "right")',
            'vertHalfBar(boxPen, "top", FAT)',
            'vertHalfBar(boxPen, "bottom")',
        ),
    ),
    (
        "rightupheavyleftdnlightbxd",
        "2544",
        (
            'horHalfBar(boxPen, "left")',
            'horHalfBar(boxPen, "right", FAT, buttL=FAT_STROKE)',
            'vertHalfBar(boxPen, "top", FAT)',
            'vertHalfBar(boxPen, "bottom")',
        ),
    ),
    (
        "leftdnheavyrightuplightbxd",
        "2545",
        (
            'horHalfBar(boxPen, "left", FAT, buttR=FAT_STROKE)',
            'horHalfBar(boxPen, "right")',
            'vertHalfBar(boxPen, "top")',
            'vertHalfBar(boxPen, "bottom", FAT)',
        ),
    ),
    (
        "rightdnheavyleftuplightbxd",
        "2546",
        (
            'horHalfBar(boxPen, "left")',
            'horHalfBar(boxPen, "right", FAT, buttL=FAT_STROKE)',
            'vertHalfBar(boxPen, "top")',
            'vertHalfBar(boxPen, "bottom", FAT)',
        ),
    ),
    (
        "dnlightuphorzheavybxd",
        "2547",
        (
            "horBar(boxPen, FAT)",
            'vertHalfBar(boxPen, "top", FAT)',
            'vertHalfBar(boxPen, "bottom")',
        ),
    ),
    (
        "uplightdnhorzheavybxd",
        "2548",
        (
            "horBar(boxPen, FAT)",
            'vertHalfBar(boxPen, "top")',
            'vertHalfBar(boxPen, "bottom", FAT)',
        ),
    ),
    (
        "rightlightleftvertheavybxd",
        "2549",
        (
            'horHalfBar(boxPen, "left", FAT)',
            'horHalfBar(boxPen, "right")',
            "vertBar(boxPen, FAT)",
        ),
    ),
    (
        "leftlightrightvertheavybxd",
        "254A",
        (
            'horHalfBar(boxPen, "left")',
            'horHalfBar(boxPen, "right", FAT)',
            "vertBar(boxPen, FAT)",
        ),
    ),
    ("heavyverthorzbxd", "254B", ("horBar(boxPen, FAT)", "vertBar(boxPen, FAT)")),
    # Double dashes
    ("lightdbldashhorzbxd", "254C", ("dashedHorLine(boxPen, 2)",)),
    ("heavydbldashhorzbxd", "254D", ("dashedHorLine(boxPen, 2, stroke=FAT_STROKE)",)),
    ("lightdbldashvertbxd", "254E", ("dashedVertLine(boxPen, 2)",)),
    ("heavydbldashvertbxd", "254F", ("dashedVertLine(boxPen, 2, stroke=FAT_STROKE)",)),
    # Double lines
    ("dblhorzbxd", "2550", ("horSplitBar(boxPen)",)),
    ("dblvertbxd", "2551", ("vertSplitBar(boxPen)",)),
    (
        "dnsngrightdblbxd",
        "2552",
        ('horSplitHalfBar(boxPen, "right")', 'vertHalfBar(boxPen, "bottom", buttT=3*STROKE)'),
    ),
    (
        "dndblrightsngbxd",
        "2553",
        (
            'horHalfBar(boxPen, "right", buttL=3*STROKE)',
            'vertSplitHalfBar(boxPen, "bottom", buttT=STROKE)',
        ),
    ),
    ("dbldnrightbxd", "2554", ('outerCorner(boxPen, "BR")', 'innerCorner(boxPen, "BR")')),
    (
        "dnsngleftdblbxd",
        "2555",
        ('horSplitHalfBar(boxPen, "left")', 'vertHalfBar(boxPen, "bottom", buttT=3*STROKE)'),
    ),
    (
        "dndblleftsngbxd",
        "2556",
        (
            'horHalfBar(boxPen, "left", buttR=3*STROKE)',
            'vertSplitHalfBar(boxPen, "bottom", buttT=STROKE)',
        ),
    ),
    ("dbldnleftbxd", "2557", ('outerCorner(boxPen, "BL")', 'innerCorner(boxPen, "BL")')),
    (
        "upsngrightdblbxd",
        "2558",
        ('horSplitHalfBar(boxPen, "right")', 'vertHalfBar(boxPen, "top", buttB=3*STROKE)'),
    ),
    (
        "updblrightsngbxd",
        "2559",
        (
            'horHalfBar(boxPen, "right", buttL=3*STROKE)',
            'vertSplitHalfBar(boxPen, "top", buttB=STROKE)',
        ),
    ),
    ("dbluprightbxd", "255A", ('outerCorner(boxPen, "TR")', 'innerCorner(boxPen, "TR")')),
    (
        "upsngleftdblbxd",
        "255B",
        ('horSplitHalfBar(boxPen, "left")', 'vertHalfBar(boxPen, "top", buttB=3*STROKE)'),
    ),
    (
        "updblleftsngbxd",
        "255C",
        (
            'horHalfBar(boxPen, "left", buttR=3*STROKE)',
            'vertSplitHalfBar(boxPen, "top", buttB=STROKE)',
        ),
    ),
    ("dblupleftbxd", "255D", ('outerCorner(boxPen, "TL")', 'innerCorner(boxPen, "TL")')),
    ("vertsngrightdblbxd", "255E", ('horSplitHalfBar(boxPen, "right")', "vertBar(boxPen)")),
    (
        "vertdblrightsngbxd",
        "255F",
        ('horHalfBar(boxPen, "right", buttL=STROKE)', "vertSplitBar(boxPen)"),
    ),
    (
        "dblvertrightbxd",
        "2560",
        (
            "vertLine(boxPen, (WIDTH/2-STROKE, MEDIAN-HEIGHT/2), "
            "(WIDTH/2-STROKE, MEDIAN+HEIGHT/2), STROKE)",
            'innerCorner(boxPen, "TR")',
            'innerCorner(boxPen, "BR")',
        ),
    ),
    ("vertsngleftdblbxd", "2561", ('horSplitHalfBar(boxPen, "left")', "vertBar(boxPen)")),
    (
        "vertdblleftsngbxd",
        "2562",
        ('horHalfBar(boxPen, "left", buttR=STROKE)', "vertSplitBar(boxPen)"),
    ),
    (
        "dblvertleftbxd",
        "2563",
        (
            "vertLine(boxPen, (WIDTH/2+STROKE, MEDIAN-HEIGHT/2), "
            "(WIDTH/2+STROKE, MEDIAN+HEIGHT/2), STROKE)",
            'innerCorner(boxPen, "TL")',
            'innerCorner(boxPen, "BL")',
        ),
    ),
    (
        "dnsnghorzdblbxd",
        "2564",
        (
            "horSplitBar(boxPen)",
            "vertLine(boxPen, (WIDTH/2, MEDIAN-HEIGHT/2), (WIDTH/2, MEDIAN-STROKE), STROKE)",
        ),
    ),
    ("dndblhorzsngbxd", "2565", ("horBar(boxPen)", 'vertSplitHalfBar(boxPen, "bottom")')),
    (
        "dbldnhorzbxd",
        "2566",
        (
            "horLine(boxPen, (0, MEDIAN+STROKE), (WIDTH, MEDIAN+STROKE), STROKE)",
            'innerCorner(boxPen, "BL")',
            'innerCorner(boxPen, "BR")',
        ),
    ),
    (
        "upsnghorzdblbxd",
        "2567",
        (
            "horSplitBar(boxPen)",
            "vertLine(boxPen, (WIDTH/2, MEDIAN+STROKE), (WIDTH/2, MEDIAN+HEIGHT/2), STROKE)",
        ),
    ),
    ("updblhorzsngbxd", "2568", ("horBar(boxPen)", 'vertSplitHalfBar(boxPen, "top")')),
    (
        "dbluphorzbxd",
        "2569",
        (
            "horLine(boxPen, (0, MEDIAN-STROKE), (WIDTH, MEDIAN-STROKE), STROKE)",
            'innerCorner(boxPen, "TL")',
            'innerCorner(boxPen, "TR")',
        ),
    ),
    ("vertsnghorzdblbxd", "256A", ("horSplitBar(boxPen)", "vertBar(boxPen)")),
    ("vertdblhorzsngbxd", "256B", ("horBar(boxPen)", "vertSplitBar(boxPen)")),
    (
        "dblverthorzbxd",
        "256C",
        (
            'innerCorner(boxPen, "TL")',
            'innerCorner(boxPen, "TR")',
            'innerCorner(boxPen, "BL")',
            'innerCorner(boxPen, "BR")',
        ),
    ),
    # Arcs
    (
        "lightarcdnrightbxd",
        "256D",
        ('arc(boxPen, (WIDTH/2, MEDIAN-HEIGHT/2), (WIDTH, MEDIAN), "TL", STROKE, RADIUS, BUTT)',),
    ),
    (
        "lightarcdnleftbxd",
        "256E",
        ('arc(boxPen, (WIDTH/2, MEDIAN-HEIGHT/2), (0, MEDIAN), "TR", STROKE, RADIUS, BUTT)',),
    ),
    (
        "lightarcupleftbxd",
        "256F",
        ('arc(boxPen, (WIDTH/2, MEDIAN+HEIGHT/2), (0, MEDIAN), "BR", STROKE, RADIUS, BUTT)',),
    ),
    (
        "lightarcuprightbxd",
        "2570",
        ('arc(boxPen, (WIDTH/2, MEDIAN+HEIGHT/2), (WIDTH, MEDIAN), "BL", STROKE, RADIUS, BUTT)',),
    ),
    # Diagonals
    (
        "lightdiaguprightdnleftbxd",
        "2571",
        (
            "diagonal(boxPen, (0, MEDIAN-EM_HEIGHT/2), (WIDTH, MEDIAN+EM_HEIGHT/2), "
            '"bottomUp")',
        ),
    ),
    (
        "lightdiagupleftdnrightbxd",
        "2572",
        (
            "diagonal(boxPen, (0, MEDIAN+EM_HEIGHT/2), (WIDTH, MEDIAN-EM_HEIGHT/2), "
            '"topDown")',
        ),
    ),
    (
        "lightdiagcrossbxd",
        "2573",
        (
            "diagonal(boxPen, (0, MEDIAN+EM_HEIGHT/2), (WIDTH, MEDIAN-EM_HEIGHT/2), "
            '"topDown")',
            "diagonal(boxPen, (0, MEDIAN-EM_HEIGHT/2), (WIDTH, MEDIAN+EM_HEIGHT/2), "
            '"bottomUp")',
        ),
    ),
    # Half lines
    ("lightleftbxd", "2574", ('horHalfBar(boxPen, "left", buttR=STROKE)',)),
    ("lightupbxd", "2575", ('vertHalfBar(boxPen, "top", buttB=STROKE)',)),
    ("lightrightbxd", "2576", ('horHalfBar(boxPen, "right", buttL=STROKE)',)),
    ("lightdnbxd", "2577", ('vertHalfBar(boxPen, "bottom", buttT=STROKE)',)),
    ("heavyleftbxd", "2578", ('horHalfBar(boxPen, "left", FAT, buttR=STROKE)',)),
    ("heavyupbxd", "2579", ('vertHalfBar(boxPen, "top", FAT, buttB=STROKE)',)),
    ("heavyrightbxd", "257A", ('horHalfBar(boxPen, "right", FAT, buttL=STROKE)',)),
    ("heavydnbxd", "257B", ('vertHalfBar(boxPen, "bottom", FAT, buttT=STROKE)',)),
    (
        "lightleftheavyrightbxd",
        "257C",
        ('horHalfBar(boxPen, "left")', 'horHalfBar(boxPen, "right", FAT, buttL=STROKE)'),
    ),
    (
        "lightupheavydnbxd",
        "257D",
        ('vertHalfBar(boxPen, "top")', 'vertHalfBar(boxPen, "bottom", FAT, buttT=STROKE)'),
    ),
    (
        "heavyleftlightrightbxd",
        "257E",
        ('horHalfBar(boxPen, "right")', 'horHalfBar(boxPen, "left", FAT, buttR=STROKE)'),
    ),
    (
        "heavyuplightdnbxd",
        "257F",
        ('vertHalfBar(boxPen, "bottom")', 'vertHalfBar(boxPen, "top", FAT, buttB=STROKE)'),
    ),
    # Blocks
    ("uphalfblock", "2580", ("box(boxPen, start=(BLOCK_ORIGIN[0], MEDIAN))",)),
    ("dneighthblock", "2581", ("box(boxPen, end=(WIDTH, BLOCK_ORIGIN[1]+BLOCK_HEIGHT*1/8))",)),
    ("dnquarterblock", "2582", ("box(boxPen, end=(WIDTH, BLOCK_ORIGIN[1]+BLOCK_HEIGHT*1/4))",)),
    (
        "dnthreeeighthsblock",
        "2583",
        ("box(boxPen, end=(WIDTH, BLOCK_ORIGIN[1]+BLOCK_HEIGHT*3/8))",),
    ),
    ("dnhalfblock", "2584", ("box(boxPen, end=(WIDTH, BLOCK_ORIGIN[1]+BLOCK_HEIGHT*1/2))",)),
    (
        "dnfiveeighthsblock",
        "2585",
        ("box(boxPen, end=(WIDTH, BLOCK_ORIGIN[1]+BLOCK_HEIGHT*5/8))",),
    ),
    (
        "dnthreequartersblock",
        "2586",
        ("box(boxPen, end=(WIDTH, BLOCK_ORIGIN[1]+BLOCK_HEIGHT*3/4))",),
    ),
    (
        "dnseveneighthsblock",
        "2587",
        ("box(boxPen, end=(WIDTH, BLOCK_ORIGIN[1]+BLOCK_HEIGHT*7/8))",),
    ),
    ("fullblock", "2588", ("box(boxPen)",)),
    ("leftseveneighthsblock", "2589", ("box(boxPen, end=(WIDTH*7/8, BLOCK_TOP[1]))",)),
    ("leftthreequartersblock", "258A", ("box(boxPen, end=(WIDTH*3/4, BLOCK_TOP[1]))",)),
    ("leftfiveeighthsblock", "258B", ("box(boxPen, end=(WIDTH*5/8, BLOCK_TOP[1]))",)),
    ("lefthalfblock", "258C", ("box(boxPen, end=(WIDTH*1/2, BLOCK_TOP[1]))",)),
    ("leftthreeeighthsblock", "258D", ("box(boxPen, end=(WIDTH*3/8, BLOCK_TOP[1]))",)),
    ("leftquarterblock", "258E", ("box(boxPen, end=(WIDTH*1/4, BLOCK_TOP[1]))",)),
    ("lefteighthblock", "258F", ("box(boxPen, end=(WIDTH*1/8, BLOCK_TOP[1]))",)),
    ("righthalfblock", "2590", ("box(boxPen, start=(WIDTH/2, BLOCK_ORIGIN[1]))",)),
    # Shades
    ("lightshade", "2591", ('polkaShade(boxPen, "25")',)),
    ("mediumshade", "2592", ('polkaShade(boxPen, "50")',)),
    ("darkshade", "2593", ('polkaShade(boxPen, "75")',)),
    (
        "upeighthblock",
        "2594",
        ("box(boxPen, start=(BLOCK_ORIGIN[0], BLOCK_ORIGIN[1]+BLOCK_HEIGHT*7/8))",),
    ),
    ("righteighthblock", "2595", ("box(boxPen, start=(WIDTH*7/8, BLOCK_ORIGIN[1]))",)),
    # Quadrants
    (
        "dnleftquadrant",
        "2596",
        ("box(boxPen, end=(WIDTH*1/2, BLOCK_ORIGIN[1]+BLOCK_HEIGHT*1/2))",),
    ),
    (
        "dnrightquadrant",
        "2597",
        ("box(boxPen, start=(WIDTH/2, BLOCK_ORIGIN[1]), end=(BLOCK_TOP[0], MEDIAN))",),
    ),
    (
        "upleftquadrant",
        "2598",
        ("box(boxPen, start=(BLOCK_ORIGIN[0], MEDIAN), end=(WIDTH*1/2, BLOCK_TOP[1]))",),
    ),
    (
        "upleftdnleftdnrightquadrant",
        "2599",
        (
            "box(boxPen, end=(WIDTH*1/2, BLOCK_TOP[1]))",
            "box(boxPen, end=(WIDTH, BLOCK_ORIGIN[1]+BLOCK_HEIGHT*1/2))",
        ),
    ),
    (
        "upleftdnrightquadrant",
        "259A",
        (
            "box(boxPen, start=(WIDTH/2, BLOCK_ORIGIN[1]), end=(BLOCK_TOP[0], MEDIAN))",
            "box(boxPen, start=(BLOCK_ORIGIN[0], MEDIAN), end=(WIDTH*1/2, BLOCK_TOP[1]))",
        ),
    ),
    (
        "upleftuprightdnleftquadrant",
        "259B",
        (
            "box(boxPen, end=(WIDTH*1/2, BLOCK_TOP[1]))",
            "box(boxPen, start=(BLOCK_ORIGIN[0], MEDIAN))",
        ),
    ),
    (
        "upleftuprightdnrightquadrant",
        "259C",
        (
            "box(boxPen, start=(WIDTH/2, BLOCK_ORIGIN[1]))",
            "box(boxPen, start=(BLOCK_ORIGIN[0], MEDIAN))",
        ),
    ),
    ("uprightquadrant", "259D", ("box(boxPen, start=(WIDTH/2, MEDIAN))",)),
    (
        "uprightdnleftquadrant",
        "259E",
        (
            "box(boxPen, end=(WIDTH*1/2, BLOCK_ORIGIN[1]+BLOCK_HEIGHT*1/2))",
            "box(boxPen, start=(WIDTH/2, MEDIAN))",
        ),
    ),
    (
        "uprightdnleftdnrightquadrant",
        "259F",
        (
            "box(boxPen, start=(WIDTH/2, BLOCK_ORIGIN[1]))",
            "box(boxPen, end=(WIDTH, BLOCK_ORIGIN[1]+BLOCK_HEIGHT*1/2))",
        ),
    ),
)
