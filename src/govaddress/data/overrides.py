"""
Known per-member corrections for House and Senate office pages.

Literals are compared after character normalization (upper case, periods
removed) but before delimiter splitting, so commas are still present.
"""

from govaddress.address.overrides import EditOp, LineEdit, MatchMode, OverrideTable

_EQ = MatchMode.EQUALS
_IN = MatchMode.CONTAINS
_STARTS = MatchMode.STARTS_WITH


def _replace(match: str, value: str, mode: MatchMode = _EQ, remove_following: int = 0) -> LineEdit:
    return LineEdit(EditOp.REPLACE, match, mode, value=value, remove_following=remove_following)


def _substitute(match: str, value: str) -> LineEdit:
    return LineEdit(EditOp.SUBSTITUTE, match, _IN, value=value)


def _remove(match: str, mode: MatchMode = _EQ) -> LineEdit:
    return LineEdit(EditOp.REMOVE, match, mode)


def _split(match: str, *values: str, mode: MatchMode = _EQ) -> LineEdit:
    return LineEdit(EditOp.SPLIT, match, mode, values=values)


HOUSE_OVERRIDES = {
    ("Matthew", "Rosendale"): [
        _replace("3300 2ND AVENUE N SUITES 7-8", "3300 2ND AVENUE N SUITE 7"),
    ],
    ("Terri", "Sewell"): [
        _replace("101 SOUTH LAWRENCE ST COURTHOUSE ANNEX 3", "101 SOUTH LAWRENCE ST"),
    ],
    ("Joe", "Wilson"): [
        _replace("1700 SUNSET BLVD (US 378), SUITE 1", "1700 SUNSET BLVD STE 1"),
    ],
    ("Robert", "Wittman"): [
        _remove("508 CHURCH LANE"),
        _remove("307 MAIN STREET"),
    ],
    ("Andy", "Biggs"): [_remove("SUPERSTITION PLAZA")],
    ("John", "Carter"): [_remove("SUITE # I-10")],
    ("Michael", "Cloud"): [_remove("TOWER II")],
    ("Tony", "Gonzales"): [_substitute(" (BY APPT ONLY)", "")],
    ("Garret", "Graves"): [
        _split("615 E WORTHY STREET GONZALES", "615 E WORTHY ST", "GONZALES", mode=_IN),
    ],
    ("Jared", "Huffman"): [
        _split(
            "430 NORTH FRANKLIN ST FORT BRAGG, CA 95437",
            "430 NORTH FRANKLIN ST",
            "FORT BRAGG, CA 95437",
        ),
        _replace("FORT BRAGG 95437", "FORT BRAGG, CA 95437", mode=_IN),
    ],
    ("Bill", "Huizenga"): [
        _substitute("108 PORTAGE, MI 49002", "108\nPORTAGE, MI 49002"),
    ],
    ("Mike", "Johnson"): [
        _remove("444 CASPARI DRIVE"),
        _remove("SOUTH HALL ROOM 224"),
        _replace("PO BOX 4989 (MAILING)", "PO BOX 4989"),
    ],
    ("Michael", "Lawler"): [_remove("PO BOX 1645")],
    ("Anna Paulina", "Luna"): [_substitute("OFFICE SUITE:", "STE")],
    ("Daniel", "Meuser"): [_replace("SUITE 110, LOSCH PLAZA", "SUITE 110")],
    ("Max", "Miller"): [
        LineEdit(EditOp.INSERT_BEFORE, "WASHINGTON", _EQ, values=("143 CANNON HOB",)),
    ],
    ("Frank", "Pallone"): [_replace("67/69 CHURCH ST", "67 CHURCH ST")],
    ("Stacey", "Plaskett"): [_replace("FREDERIKSTED, VI 00840", "ST CROIX, VI 00840")],
}

SENATE_OVERRIDES = {
    ("Tommy", "Tuberville"): [
        _replace("BB&T CENTRE 41 WEST I-65", "41 W I-65 SERVICE RD N STE 2300-A", remove_following=1),
    ],
    ("Chuck", "Grassley"): [_remove("210 WALNUT STREET")],
    ("Joni", "Ernst"): [
        _replace("2146 27", "2146 27TH AVE", remove_following=2),
        _remove("210 WALNUT STREET"),
    ],
    ("Roger", "Marshall"): [_substitute("20002", "20510")],
    ("Angus", "King"): [_replace("40 WESTERN AVE", "40 WESTERN AVE UNIT 412", mode=_STARTS)],
    ("Benjamin", "Cardin"): [_replace("TOWER 1, SUITE 1710", "SUITE 1710")],
    ("Jeanne", "Shaheen"): [_remove("OFFICE BUILDING")],
    ("Robert", "Menendez"): [_replace("HARBORSIDE 3, SUITE 1000", "SUITE 1000")],
    ("Martin", "Heinrich"): [
        _replace("709 HART", "709 HART SOB, WASHINGTON, DC 20510", mode=_STARTS),
    ],
    ("Charles", "Schumer"): [_replace("LEO O'BRIEN", "1 CLINTON SQ STE 827", mode=_STARTS)],
    ("Kevin", "Cramer"): [
        _remove("328 FEDERAL BUILDING"),
        _replace("220 EAST ROSSER AVENUE", "220 EAST ROSSER AVENUE RM 328"),
    ],
    ("Sheldon", "Whitehouse"): [_replace("HART SENATE", "530 HART SOB", mode=_STARTS)],
    ("John", "Thune"): [_replace("UNITED STATES SENATE SD-511", "511 DIRKSEN SOB")],
    ("Mike", "Rounds"): [_replace("HART SENATE", "716 HART SOB", mode=_STARTS)],
    ("Marsha", "Blackburn"): [_replace("10 WEST M", "10 MARTIN LUTHER KING BLVD", mode=_STARTS)],
    ("Bill", "Hagerty"): [
        _replace("109 S", "109 S HIGHLAND AVE", mode=_STARTS),
        _replace("20002", "20510"),
    ],
    ("Ted", "Cruz"): [
        _replace("MICKEY LELAND FEDERAL", "1919 SMITH ST STE 9047", mode=_STARTS),
        _replace("167 RUSSELL", "167 RUSSELL SOB"),
    ],
    ("Peter", "Welch"): [_substitute("SR-124 RUSSELL", "124 RUSSELL")],
    ("John", "Barrasso"): [_replace("(COMMERCE BANK)", "1575 DEWAR DR", mode=_IN)],
    ("Cynthia", "Lummis"): [
        _split("RUSSELL SENATE", "127 RUSSELL SOB", "WASHINGTON, DC 20510", mode=_STARTS),
        _split("FEDERAL CENTER", "2120 CAPITOL AVE STE 2007", "CHEYENNE, WY 82001", mode=_STARTS),
    ],
}

DEFAULT_OVERRIDES = OverrideTable({**HOUSE_OVERRIDES, **SENATE_OVERRIDES})
