"""ASCII art for the three moves and the "VS" separator.

Every piece is ART_HEIGHT lines of ART_WIDTH columns so that three of them
can be printed side by side.
"""
from .moves import Move

ART_HEIGHT = 20
ART_WIDTH = 60

STONE = (
    "                                                            ",
    "                                                            ",
    "                                                            ",
    "                        ...'..                              ",
    "                ...,;cloooolodddl:,..                       ",
    "          .::clllooooooooooollllllooddddl:,'.               ",
    "         :lllllllooooooooddoolllllllllldxxxxxxl'            ",
    "        ,;::cllllooooooooddddddlllllllllldxxxxxxd:          ",
    "       .,,,,,,,:clodoooooddddddddollllllllxxxxxxxxxc.       ",
    "        ,,,,,,,,,,,,;::clddddddddddddooolloxxxxxxxxx:       ",
    "        .,,,,,,,,,,,,,,,,,:clodddddddxxxxdoodxxxxxx:        ",
    "        ,;;;,,,,,,,,,,,,,,,,,,,;:ccdxxxxxxxxxddlol.         ",
    "       .;;;;;;;;;;;,,,,,,,,,,,;;;,,::::::;,,'''             ",
    "       .;;;;;;;;;;;;;;:;;;,,,,''''''''''''''                ",
    "           ';;;;;;;,,,'''''''''''''''''''.                  ",
    "                         .''''''''''''.                     ",
    "                                                            ",
    "                                                            ",
    "                                                            ",
    "                                                            ",
)

PAPER = (
    "                                                            ",
    "           ...........................                      ",
    "           'okkkkkkkkkkk         ;l,  '.                    ",
    "           'd000000000          .ll;.   ...                 ",
    "           'd0000000o            ll''      '.               ",
    "           'd000000k             ;l''......''''             ",
    "           'd000000.                 lllc    ..             ",
    "           'd000000                          '.             ",
    "           'd000000                                         ",
    "           'd000000                          .              ",
    "           'd000000'                                        ",
    "           'd000000O                                        ",
    "           'd0000000k                        '.             ",
    "           'd00000000k.                      '.             ",
    "           'd0000000000l                     '.             ",
    "           'd000000000000o,                  '.             ",
    "           'd00000000000000Oc.               '.             ",
    "           'd00000000000000000x;             '.             ",
    "           ;;:::::::::::::::::::;'..........''.             ",
    "                                                            ",
)

SCISSORS = (
    "                                                            ",
    "             .,c:.                        ,x:'.             ",
    "            .:odOkc.                    ;kxcxKc.            ",
    "            .codOkldl.               .;kxcxKKKl             ",
    "              :oxkkl:ol'           .:kxcxKKKO,              ",
    "                .oxkklcxo'       .:Ox:xKKKO,                ",
    "                  :oxkkoxko,.  .:OxcxKKKO,                  ",
    "                    'odkOOOOd,'OxcxKKKO'                    ",
    "                      'ldkOOOOd;;0KKk.                      ",
    "                        .ldx:::cd:l'                        ",
    "                       .'c;c;;:ckOd'.                       ",
    "                    .':ooc:',cddl:cooc'.                    ",
    "               ..,:loddddddo;  ,coddddddl:,'..              ",
    "           .,colc. cldddddc      ;codddl'  'lol;.           ",
    "          'ld;        'od:.      .,cc,        'oo'          ",
    "         .cd;          ,dl.      .:c,          ,dl.         ",
    "          ;dl.        .cdc        ,c:.        .cd;          ",
    "           .loc,....':oo,          .:c:,....,col.           ",
    "               .cllc.                   ;cc:                ",
    "                                                            ",
)

VS = (
    "                                                            ",
    "                     :dkKXWMMMMWXKkd:                       ",
    "                .lxOXWMMMMMMMMMMMMMMM,                      ",
    "             ;xKMMMMMMMMMMMMMMMMMMMM'                       ",
    "          .dXMMMMMMMMMMMMMMMMMMMMMM' d                      ",
    "         xWMMMMMMMMMMMMMMMMMMMMMMM. xl                      ",
    "       ,NMMMMMMMMMMMMMMMMMMMMMMMM. kN .'                    ",
    "      ;WMMMMMMMMMd    dMMMM0      kMl.O .                   ",
    "     .WMMMMMMMMMM0    'MMMO      OMM:doo:;                  ",
    "     kMMMMMMMMMMMW     WMO      OMMMMo,KMMMM;               ",
    "     WMMMMMMMMMMMM.    OO      kMMMMN                       ",
    "     KMMMMMMMMMMMMl    '       .dNMMMMNd'                   ",
    "     ,MMMMMMMMMMMMO                kMMMMM;                  ",
    "      kMMMMMMMMMMMWOoolO    0MMMM; oMMMMl                   ",
    "       xMMMMMMMMMMMXN'Xo   .d0XNNO0XKko.                    ",
    "        .MMMMMMMMMMM0NW                                     ",
    "          ,MMMMMMMMMMMo                                     ",
    "             XMMMMMMMN                                      ",
    "                ;MMMW                                       ",
    "                                                            ",
)

MOVE_ART = {
    Move.STONE: STONE,
    Move.PAPER: PAPER,
    Move.SCISSORS: SCISSORS,
}


def side_by_side(*arts):
    """Yield one joined line per row of the given arts."""
    for row in zip(*arts):
        yield "".join(row)
