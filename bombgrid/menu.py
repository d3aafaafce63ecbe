"""The animated title screen with its main menu."""

from __future__ import annotations

import curses
import random
import time

FPS = 15
EMBER_COUNT = 10

_TITLE_FRAMES = (
    (
        ":::+:::::   ::::::::  ::::    :::+  +::::::::  :::::::::: :::::::::  ::::    ::::      ::+     ::::    :::",
        ":+:    :+: :+:    :+: +:+:+: :+:+:+ :+:    :+: :+:        :+:    :+: +:+:+: :+:+:+   :+: :+:   :+:+:   :+:",
        "+:+    +:+ +:+    +:+ +:+ +:+:+ +:+ +:+    +:+ +:+        +:+    +:+ +:+ +:+:+ +:+  +:+   +:+  :+:+:+  +:+",
        "+#++:++#+  +#+    +:+ +#+  +:+  +#+ +#++:++#+  +#++:++#   +#++:++#:  +#+  +:+  +#+ +#++:++#++: +#+ +:+ +#+",
        "+#+    +#+ +#+    +#+ +#+       +#+ +#+    +#+ +#+        +#+    +#+ +#+       +#+ +#+     +#+ +#+  +#+#+#",
        "#+#    #+# #+#    #+# #+#       #+# #+#    #+# #+#        #+#    #+# #+#       #+# #+#     #+# #+#   #+#+#",
        "#########   ########  ###       ### #########  ########## ###    ### ###       ### ###     ### ###    ####",
    ),
    (
        ":::::::::   +::::::+  +:::    :+::  ::+:::::+  ::+::+:::: ::+::::+:  +:::    :+::      +::     :+:+    ::+",
        "+:+    +:+ +:+    +:+ :::+++ :+::++ :++    +:+ ::+        +:+    +:+ :::+++ :+::++   +:+ ::+   ::+:+   +:+",
        ":+:    :++ :++    :++ ::+ :++:: :++ :+:    :+: :+:        :++    :+: ::+ :++:: :++  +::   +:+  :+::+:  ++:",
        "+#++:++:#  +#+    +:+ #:+  :++  #+# #+#:++:+#  #+#+#:++   +#+:#+:#:  #:+  :++  #+# ++#+:+:+:#+ +#+ +#: ###",
        "#+#    #+# ++#    #+# #+#       #+# ++#    #+# #+#        #+#    +## #+#       #+# +##     #+# ++#  +#+#++",
        "##+    +## +##    +## ##+       +## +##    ##+ ###        ##+    +## ##+       +## +##     +## +##   #+##+",
        "#########   ########  ###       ### #########  ########## ###    ### ###       ### ###     ### ###    ####",
    ),
    (
        "::+:+:::+   :::::+:+  :+::    :+::  +:::++:::  :::+::+::+ +::::+:::  :::+    :::+      ++:     +:::    :::",
        "+++    :+# +::    ::: ++++:+ :#+::+ :::    ::: +++        +::    :+# ++++:+ ++::::   ::: ++:   ::::#   :+:",
        "+::    :#+ ++:    ::+ ++: +:#:+ +:: :#:    +:+ +::        ::+    +:: ::+ ::#+: :+:  #:+   :++  :+++++  :++",
        "##++:#+:#  :+#    :+: +++  :+#  +:+ +:#+::+:#  +:##+:::   ##+:+#:#:  +::  ++#  ### +:##+:+::#: :#: :#+ +++",
        "++#    +#+ +#+    ##+ +#+       +#+ #+#    +## #++        ##+    +## #+#       ##+ +##     #+# +##  +##+#+",
        "+#+    ##+ #++    #++ #+#       #+# ##+    +## ###        #++    ++# +##       +## ##+     +#+ +##   +++#+",
        "#########   ########  ###       ### #########  ########## ###    ### ###       ### ###     ### ###    ####",
    ),
    (
        ":::::::::   +::+::::  ::::    :::+  +::+:::+:  ++:+::::++ +:+:+:+:+  :+:+    +:+:      ::+     +::+    +:+",
        "+:+    :.: +:+    ::+ ::++:+ ::::+: :::    +:+ +:+        :++    +:: ::+::+ +:+:::   +:: +:+   :+++:   ::+",
        "#+#    +++ #:+    ::# +:: ::#+: #+: :+:    ::+ :++        #+#    ++# ::: :+::: ::#  #+:   :+:  +:::+:  :++",
        ":+:#:+:##  #+:    #++ :++  :+:  :++ :#::+++#+  :##::+:#   :+::+:##+  :#:  #:#  :+: +#:+++:##:+ :+: :+: +##",
        "#++    ##+ ++#    +## ##+       +## +#+    +## #+#        +##    ++# +++       #+# +#+     ++# #++  :##+##",
        "#+#    #++ ##+    ### +##       ##+ #+#    +#+ +#+        +#+    ### ###       +#+ ##+     +#+ ###   ++##+",
        "#########   ########  ###       ### #########  ########## ###    ### ###       ### ###     ### ###    ####",
    ),
)

_MENU = ("New Game", "Leaderboard", "Quit")
_STATES = ("G", "H", "Q")

_UP_KEYS = frozenset({curses.KEY_UP, ord("w"), ord("W")})
_DOWN_KEYS = frozenset({curses.KEY_DOWN, ord("s"), ord("S")})
_CONFIRM_KEYS = frozenset({10, ord(" "), ord("e"), ord("E")})


def next_selection(selection, key):
    """Return the menu entry selected after a key press."""
    if key in _UP_KEYS and selection > 0:
        return selection - 1
    if key in _DOWN_KEYS and selection < len(_MENU) - 1:
        return selection + 1
    return selection


def selection_state(selection):
    """Return the state a menu entry leads to ('E' for an unknown entry)."""
    if 0 <= selection < len(_STATES):
        return _STATES[selection]
    return "E"


def _put(window, y, x, text, attr=0):
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


def _window_size(window):
    height, width = window.getmaxyx()
    if width == 1 or height == 1:
        return curses.LINES, curses.COLS
    return height, width


def _ember_glyph(y, height):
    if y > height // 3 * 2:
        return "#"
    if y > height // 3:
        return "+"
    return ":"


def _update_embers(window, embers, selection, width, height, rng):
    for ember in embers:
        x, y = ember
        _put(window, y, x, " ")
        y -= rng.randrange(2 * (3 - selection))
        x += rng.randrange(4) - 2
        if y <= 0:
            x = rng.randrange(width)
            y = height - 2
        if x <= 0:
            x = width
        if x >= width:
            y = 0
        ember[0], ember[1] = x, y
        _put(window, y, x, _ember_glyph(y, height))


def menu_loop(window):
    """Show the animated title and menu; return the state chosen."""
    window.erase()
    window.keypad(True)
    window.nodelay(True)
    height, width = _window_size(window)
    rng = random.Random()

    embers = [[rng.randrange(width), rng.randrange(height)] for _ in range(EMBER_COUNT)]

    curses.start_color()
    curses.init_pair(1, curses.COLOR_YELLOW, curses.COLOR_BLACK)

    selection = 0
    frame = 0
    while True:
        snapshot = time.monotonic()
        key = window.getch()
        selection = next_selection(selection, key)
        if key in _CONFIRM_KEYS:
            break

        window.box("!", "=")
        for row, line in enumerate(_TITLE_FRAMES[frame]):
            _put(window, 4 + row, width // 2 - len(line) // 2, line)

        _update_embers(window, embers, selection, width, height, rng)

        for index, label in enumerate(_MENU):
            y = 16 + index * 2
            x = width // 2 - len(label) // 2
            chosen = selection == index
            _put(window, y, x - 2, ">" if chosen else " ")
            attr = curses.color_pair(1) | curses.A_BOLD if chosen else 0
            _put(window, y, x, label, attr)

        window.refresh()

        delay = 1 / FPS - (time.monotonic() - snapshot)
        if delay > 0:
            time.sleep(delay)
        frame = (frame + 1) % len(_TITLE_FRAMES)

    return selection_state(selection)