"""Display headers and sort order of documentation sections, keyed by kind."""

USER_DEFINED_KIND = "user-defined"
USER_DEFINED_HEADER = "User Defined"

# kind -> (header, order)
SECTION_HEADERS: dict[str, tuple[str, int]] = {
    "typedef": ("Typedefs", 100),
    "public-type": ("Public Member Typedefs", 110),
    "protected-type": ("Protected Member Typedefs", 120),
    "private-type": ("Private Member Typedefs", 130),
    "package-type": ("Package Member Typedefs", 140),
    "enum": ("Enumerations", 150),
    "friend": ("Friends", 160),
    "interface": ("Interfaces", 170),
    "constructor": ("Constructors", 200),
    "public-constructor": ("Public Constructors", 200),
    "protected-constructor": ("Protected Constructors", 210),
    "private-constructor": ("Private Constructors", 220),
    "package-constructor": ("Package Constructors", 225),
    "destructor": ("Destructor", 230),
    "public-destructor": ("Public Destructor", 230),
    "protected-destructor": ("Protected Destructor", 240),
    "private-destructor": ("Private Destructor", 250),
    "package-destructor": ("Package Destructor", 255),
    "operator": ("Operators", 300),
    "public-operator": ("Public Operators", 310),
    "protected-operator": ("Protected Operators", 320),
    "private-operator": ("Private Operators", 330),
    "package-operator": ("Package Operators", 340),
    "func": ("Functions", 350),
    "function": ("Functions", 350),
    "public-func": ("Public Member Functions", 360),
    "protected-func": ("Protected Member Functions", 370),
    "private-func": ("Private Member Functions", 380),
    "package-func": ("Package Member Functions", 390),
    "var": ("Variables", 400),
    "variable": ("Variables", 400),
    "public-attrib": ("Public Member Attributes", 410),
    "protected-attrib": ("Protected Member Attributes", 420),
    "private-attrib": ("Private Member Attributes", 430),
    "package-attrib": ("Package Member Attributes", 440),
    "public-static-operator": ("Public Static Operators", 450),
    "protected-static-operator": ("Protected Static Operators", 460),
    "private-static-operator": ("Private Static Operators", 470),
    "package-static-operator": ("Package Static Operators", 480),
    "public-static-func": ("Public Static Functions", 500),
    "protected-static-func": ("Protected Static Functions", 510),
    "private-static-func": ("Private Static Functions", 520),
    "package-static-func": ("Package Static Functions", 530),
    "public-static-attrib": ("Public Static Attributes", 600),
    "protected-static-attrib": ("Protected Static Attributes", 610),
    "private-static-attrib": ("Private Static Attributes", 620),
    "package-static-attrib": ("Package Static Attributes", 630),
    "slot": ("Slots", 700),
    "public-slot": ("Public Slot", 700),
    "protected-slot": ("Protected Slot", 710),
    "private-slot": ("Private Slot", 720),
    "related": ("Related", 800),
    "define": ("Macro Definitions", 810),
    "prototype": ("Prototypes", 820),
    "signal": ("Signals", 830),
    "dcop": ("DCOP Functions", 840),
    "dcop-func": ("DCOP Functions", 840),
    "property": ("Properties", 850),
    "event": ("Events", 860),
    "service": ("Services", 870),
    USER_DEFINED_KIND: (USER_DEFINED_HEADER, 1000),
}


def header_for_kind(kind: str) -> str:
    """Return the display header of a section kind, or an empty string."""
    entry = SECTION_HEADERS.get(kind)
    return entry[0] if entry else ""


def order_for_kind(kind: str) -> int:
    """Return the sort order of a section kind; unknown kinds sort with user sections."""
    entry = SECTION_HEADERS.get(kind)
    return entry[1] if entry else SECTION_HEADERS[USER_DEFINED_KIND][1]
