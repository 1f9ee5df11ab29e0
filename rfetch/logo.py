"""
Built-in ASCII logos, keyed by operating system.

get_logo() picks a block by case-insensitive substring match on the OS
name. Blocks are stored as tuples; callers always get a fresh list.
"""

from __future__ import annotations

from typing import Union

from rfetch.config import LogoType


# ── Full-size logos ───────────────────────────────────────────────────────────

_ARCH = (
    "                   -`                    ",
    "                  .o+`                   ",
    "                 `ooo/                   ",
    "                `+oooo:                  ",
    "               `+oooooo:                 ",
    "               -+oooooo+:                ",
    "             `/:-:++oooo+:               ",
    "            `/++++/+++++++:              ",
    "           `/++++++++++++++:             ",
    "          `/+++ooooooooo++++/`           ",
    "         ./ooosssso++osssssso+`          ",
    "        .oossssso-````/ossssss+`         ",
    "       -osssssso.      :ssssssso.        ",
    "      :osssssss/        osssso+++.       ",
    "     /ossssssss/        +ssssooo/-       ",
    "   `/ossssso+/:-        -:/+osssso+-     ",
    "  `+sso+:-`                 `.-/+oso:    ",
    " `++:.                           `-/+/   ",
    " .`                                 `/   ",
)

_UBUNTU = (
    "            .-/+oossssoo+/-.               ",
    "        `:+ssssssssssssssssss+:`           ",
    "      -+ssssssssssssssssssyyssss+-         ",
    "    .osssssssssssssssssdMMMNysssso.        ",
    "   /ssssssssssshdmmNNmmyNMMMMhssssss/      ",
    "  +ssssssssshmydMMMMMMMNddddyssssssss+     ",
    " /sssssssshNMMMyhhyyyyhmNMMMNhssssssss/    ",
    ".ssssssssdMMMNhsssssssssshNMMMdssssssss.   ",
    "+sssshhhyNMMNyssssssssssssyNMMMysssssss+   ",
    "ossyNMMMNyMMhsssssssssssssshmmmhssssssso   ",
    "ossyNMMMNyMMhsssssssssssssshmmmhssssssso   ",
    "+sssshhhyNMMNyssssssssssssyNMMMysssssss+   ",
    ".ssssssssdMMMNhsssssssssshNMMMdssssssss.   ",
    " /sssssssshNMMMyhhyyyyhdNMMMNhssssssss/    ",
    "  +sssssssssdmydMMMMMMMMddddyssssssss+     ",
    "   /ssssssssssshdmNNNNmyNMMMMhssssss/      ",
    "    .osssssssssssssssssdMMMNysssso.        ",
    "      -+sssssssssssssssssyyyssss+-         ",
    "        `:+ssssssssssssssssss+:`           ",
    "            .-/+oossssoo+/-.               ",
)

_FEDORA = (
    "             .',;::::;,'.                ",
    "         .';;;;;;;;;;;;;,'.              ",
    "      .,;;;;;;;;;;;;;;;;;;;,.            ",
    "     .,;;;;;;;;;;;;;;;;;;;;;;,.          ",
    "    .;;;;;;;;;;;;;;;;;;;;;;;;;,'.        ",
    "   .;;;;;;;;;;;;;;;;;;;;;;;;;;;;,.       ",
    "   ,;;;;;;;;;;;;;;;;;;;;;;;;;;;;,.       ",
    "   ;;;;;;;;;;;;;;;;;;;;;;;;;;;;;;,       ",
    "   ;;;;;;;;;;;;;;;;;;;;;;;;;;;;;;;       ",
    "   ;;;;;;;;;;;;;;;;;;;;;;;;;;;;;;;       ",
    "   ;;;;;;;;;;;;;;;;;;;;;;;;;;;;,'.       ",
    "   .;;;;;;;;;;;;;;;;;;;;;;;;;,'.         ",
    "    .;;;;;;;;;;;;;;;;;;;;;,'.            ",
    "     .;;;;;;;;;;;;;;;;;,'.               ",
    "       .;;;;;;;;;;;;;,'.                 ",
    "         .';;;;;;;;;,'.                  ",
    "             .',;,'.                     ",
)

_DEBIAN = (
    "       _,met$$$$$gg.          ",
    "    ,g$$$$$$$$$$$$$$$P.       ",
    "  ,g$$P\"     \"\"\"Y$$.\"^.      ",
    " ,$$P'              `$$$.     ",
    "',$$P       ,ggs.     `$$b:   ",
    "`d$$'     ,$P\"'   .    $$$    ",
    " $$P      d$'     ,    $$P    ",
    " $$:      $$.   -    ,d$$'    ",
    " $$;      Y$b._   _,d$P'      ",
    " Y$$.    `.`\"Y$$$$P\"'         ",
    " `$$b      \"-.__              ",
    "  `Y$$                        ",
    "   `Y$$.                      ",
    "     `$$b.                    ",
    "       `Y$$b.                 ",
    "          `\"Y$b._             ",
    "              `\"\"\"\"           ",
)

_MACOS = (
    "                    'c.          ",
    "                 ,xNMM.          ",
    "               .OMMMMo           ",
    "               OMMM0,            ",
    "     .;loddo:' loolloddol;.      ",
    "   cKMMMMMMMMMMNWMMMMMMMMMM0:    ",
    " .KMMMMMMMMMMMMMMMMMMMMMMMWd.    ",
    " XMMMMMMMMMMMMMMMMMMMMMMMX.      ",
    ";MMMMMMMMMMMMMMMMMMMMMMMM:       ",
    ":MMMMMMMMMMMMMMMMMMMMMMMM:       ",
    ".MMMMMMMMMMMMMMMMMMMMMMMMX.      ",
    " kMMMMMMMMMMMMMMMMMMMMMMMMWd.    ",
    " .XMMMMMMMMMMMMMMMMMMMMMMMMMMk   ",
    "  .XMMMMMMMMMMMMMMMMMMMMMMMMK.   ",
    "    kMMMMMMMMMMMMMMMMMMMMMMd     ",
    "     ;KMMMMMMMWXXWMMMMMMMk.      ",
    "       .cooc,.    .,coo:.        ",
)

_IOS = (
    "                 .8888b           ",
    "                d88888b           ",
    "                888888b           ",
    "                Y888888           ",
    "                 Y88888           ",
    "                 d88888           ",
    "               .d888888b          ",
    "              .d88888888b         ",
    "             .d8888888888b        ",
    "            .d888888888888b       ",
    "           .d88888888888888b      ",
    "          .d8888888888888888b     ",
    "         .d888888888888888888b    ",
    "        .d88888888888888888888b   ",
    "       .d8888888888888888888888b  ",
    "      .d888888888888888888888888b ",
    "     .d88888888888888888888888888b",
    "     Y888888888888888888888888888P",
    "      Y8888888888888888888888888P ",
    "       Y88888888888888888888888P  ",
    "        Y888888888888888888888P   ",
    "         Y8888888888888888888P    ",
    "          Y88888888888888888P     ",
    "           Y888888888888888P      ",
    "            Y8888888888888P       ",
    "             Y88888888888P        ",
    "              Y888888888P         ",
    "               Y8888888P          ",
    "                Y88888P           ",
    "                 Y888P            ",
    "                  Y8P             ",
    "                   Y              ",
)

_WINDOWS = (
    "                                ..,       ",
    "                    ....,,:;+ccllll      ",
    "      ...,,+:;  cllllllllllllllllll      ",
    ",cclllllllllll  lllllllllllllllllll      ",
    "llllllllllllll  lllllllllllllllllll      ",
    "llllllllllllll  lllllllllllllllllll      ",
    "llllllllllllll  lllllllllllllllllll      ",
    "llllllllllllll  lllllllllllllllllll      ",
    "llllllllllllll  lllllllllllllllllll      ",
    "                                         ",
    "llllllllllllll  lllllllllllllllllll      ",
    "llllllllllllll  lllllllllllllllllll      ",
    "llllllllllllll  lllllllllllllllllll      ",
    "llllllllllllll  lllllllllllllllllll      ",
    "llllllllllllll  lllllllllllllllllll      ",
    "`'ccllllllllll  lllllllllllllllllll      ",
    "       `' \\*::  :ccllllllllllllllll      ",
    "                       ````''*::cll      ",
    "                                 ``      ",
)

_GENTOO = (
    "         -/oyddmdhs+:.                ",
    "     -odNMMMMMMMMNNmhy+-`             ",
    "   -yNMMMMMMMMMMMNNNmmdhy+-           ",
    " `omMMMMMMMMMMMMNmdmmmmddhhy/`        ",
    " omMMMMMMMMMMMNhhyyyohmdddhhhdo`      ",
    ".ydMMMMMMMMMMdhs++so/smdddhhhhdm+`    ",
    " oyhdmNMMMMMMMNdyooydmddddhhhhyhNd.   ",
    "  :oyhhdNNMMMMMMMNNNmmdddhhhhhyymMh   ",
    "    .:+sydNMMMMMNNNmmmdddhhhhhhmMmy   ",
    "       /mMMMMMMNNNmmmdddhhhhhmMNhs:   ",
    "    `oNMMMMMMMNNNmmmddddhhdmMNhs+`    ",
    "  `sNMMMMMMMMNNNmmmdddddmNMmhs/.      ",
    " /NMMMMMMMMNNNNmmmdddmNMNdso:`        ",
    "+MMMMMMMNNNNNmmmmdmNMNdso/-           ",
    "yMMNNNNNNNmmmmmNNMmhs+/-`             ",
    "/hMMNNNNNNNNMNdhs++/-`                ",
    "`/ohdmmddhys+++/:.`                   ",
    "  `-//////:--.                       ",
)

_MANJARO = (
    "██████████████████  ████████     ",
    "██████████████████  ████████     ",
    "██████████████████  ████████     ",
    "██████████████████  ████████     ",
    "████████            ████████     ",
    "████████  ████████  ████████     ",
    "████████  ████████  ████████     ",
    "████████  ████████  ████████     ",
    "████████  ████████  ████████     ",
    "████████  ████████  ████████     ",
    "████████  ████████  ████████     ",
    "████████  ████████  ████████     ",
    "████████  ████████  ████████     ",
    "████████  ████████  ████████     ",
)

_OPENSUSE = (
    "           .;ldkO0000Okdl;.           ",
    "       .;d00xl:^''''''^:ok00d;.       ",
    "     .d00l'                'o00d.     ",
    "   .d0Kd'  Okxol:;,.          :O0d.   ",
    "  .OK KKK0kOKKKKKKKKKKOxo:,      lKO.  ",
    " ,0K KKKKKKKKKKKKKKK0P^,,,^dx:    ;00, ",
    ".OK KKKKKKKKKKKKKKKk'^0KKKKK0d:    lOO.",
    ",KK KKKKKKKKKKKKKK0x;,,oOKKKKKKK0d:  ;KK,",
    ",KK KKKKKKKKKKKKKK.^KKK0d^0KKKKKKK0d: ;KK,",
    ".OK KKKKKKKKKKKKKKKx.^KKKd .dKKKKKKKKOd;lOO.",
    " ,0K KKKKKKKKKKKKKKK0^.KK0d:^OKKKKKKKK0d;00, ",
    "  .OK KKK0xOKKKKKKKKKKK0.^KKKKKKKKKKKKKKKKKd:lKO.  ",
    "   .d0Kd '^OKKKKKKKKKKKK0.^KKKKKKKKKKKKKKKKKKKd:O0d.   ",
    "     .d00l' '^O0KKKKKKKKKKK0.^KKKKKKKKKKKKKKKKKK0d:00d.     ",
    "       .;d00xl;,,;^OKKKKKKKKKK0.^KKKKKKKKKKKKKKKKK0d:O0d;.       ",
    "           .;ldkO0000OKKKKKKKKKK0.^KKKKKKKKKKKKKKKK0d:O0d;.           ",
)

_CENTOS = (
    "                 ..                    ",
    "               .PLTJ.                  ",
    "              <><><><>                 ",
    "     KKSSV' 4KKK LJ KKKL.'VSSKK        ",
    "     KKV' 4KKKKK LJ KKKKAL 'VKK        ",
    "     V' ' 'VKKKK LJ KKKKV' ' 'V        ",
    "     .4MA.' 'VKK LJ KKV' '.4Mb.        ",
    "   . KKKKKA.' 'V LJ V' '.4KKKKK .      ",
    " .4D KKKKKKKA.'' LJ ''.4KKKKKKK FA.    ",
    "<QDD ++++++++++++  ++++++++++++++ GFD> ",
    " 'VD KKKKKKKK'.. LJ ..'KKKKKKKK FV'    ",
    "   ' VKKKKK'. .4 LJ K. .'KKKKKV '      ",
    "      'VK'. .4KK LJ KKA. .'KV'         ",
    "     A. . .4KKKK LJ KKKKA. . .4        ",
    "     KKA. 'KKKKK LJ KKKKK' .4KK        ",
    "     KKSSA. VKKK LJ KKKV .4SSKK        ",
    "              <><><><>                 ",
    "               'MKKM'                  ",
    "                 ''                    ",
)

_ALPINE = (
    "       .hddddddddddddddddddddddh.       ",
    "      :dddddddddddddddddddddddddd:      ",
    "     /dddddddddddddddddddddddddddd/     ",
    "    +dddddddddddddddddddddddddddddd+    ",
    "  `sdddddddddddddddddddddddddddddddds`  ",
    "  `ydddddddddddd++hdddddddddddddddddy`  ",
    "   .hddddddddddd+`  `+ddddddddddddddh.   ",
    "    `ydddddddddd:      :dddddddddddy`    ",
    "     `sdddddddd+        +ddddddddds`     ",
    "       `yddddd:          :dddddy`       ",
    "         `sdd+            +dds`         ",
    "           `:              :`           ",
)

_TERMUX = (
    "                                      ",
    "    ████████ ████████ ████████       ",
    "   ██      ██      ██      ██        ",
    "   ██      ██      ██      ██        ",
    "   ██      ██      ██      ██        ",
    "   ████████ ████████ ████████        ",
    "   ██                               ",
    "   ██   ████████ ████████ ██   ██    ",
    "   ██   ██       ██    ██ ██   ██    ",
    "   ██   ████████ ████████ ███████    ",
    "   ██   ██       ██  ██   ██   ██    ",
    "   ██   ████████ ██   ██  ██   ██    ",
    "                                     ",
    "        📱 Android Terminal 📱        ",
    "                                     ",
)

_GENERIC = (
    "   _____   ",
    "  /     \\  ",
    " | () () | ",
    "  \\  ^  /  ",
    "   |||||   ",
    "   |||||   ",
)

# ── Small & block logos ───────────────────────────────────────────────────────

_SMALL_TERMUX = ("  📱  ",)
_SMALL_ARCH = ("  /\\  ", " /  \\ ", "/____\\")
_SMALL_UBUNTU = ("  ___  ", " (   ) ", "  \\_/  ")
_SMALL_MACOS = ("   🍎   ",)
_SMALL_IOS = ("   📱   ",)
_SMALL_WINDOWS = ("  ▢▢  ", "  ▢▢  ")
_SMALL_GENERIC = ("  ●  ",)

_BLOCK = (
    "  ██████  ",
    " ████████ ",
    "██████████",
    " ████████ ",
    "  ██████  ",
)

# First match wins, so termux is checked before the distro names it runs on
_AUTO_TABLE: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("termux",), _TERMUX),
    (("arch",), _ARCH),
    (("ubuntu",), _UBUNTU),
    (("fedora",), _FEDORA),
    (("debian",), _DEBIAN),
    (("macos", "darwin"), _MACOS),
    (("ios",), _IOS),
    (("windows",), _WINDOWS),
    (("gentoo",), _GENTOO),
    (("manjaro",), _MANJARO),
    (("opensuse",), _OPENSUSE),
    (("centos",), _CENTOS),
    (("alpine",), _ALPINE),
)

_SMALL_TABLE: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("termux",), _SMALL_TERMUX),
    (("arch",), _SMALL_ARCH),
    (("ubuntu",), _SMALL_UBUNTU),
    (("macos", "darwin"), _SMALL_MACOS),
    (("ios",), _SMALL_IOS),
    (("windows",), _SMALL_WINDOWS),
)


def _match(os_name: str, table, fallback: tuple[str, ...]) -> tuple[str, ...]:
    name = os_name.lower()
    for needles, block in table:
        if any(needle in name for needle in needles):
            return block
    return fallback


def get_logo(os_name: str, logo_type: Union[LogoType, str] = LogoType.AUTO) -> list[str]:
    """
    Return the logo lines for `os_name`.

    `none` gives an empty list, `small` a 1–3 line glyph, `ascii` the
    generic block art, and anything else the full distribution logo.
    """
    kind = LogoType.parse(logo_type)
    if kind is LogoType.NONE:
        return []
    if kind is LogoType.SMALL:
        return list(_match(os_name, _SMALL_TABLE, _SMALL_GENERIC))
    if kind is LogoType.ASCII:
        return list(_BLOCK)
    return list(_match(os_name, _AUTO_TABLE, _GENERIC))
