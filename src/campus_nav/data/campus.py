# data/campus.py
"""
Built-in campus datasets.

`landmarks`: 25 named landmarks keyed by their display name, with x = longitude and
y = latitude in degrees, joined by 30 paths weighted in metres. The straight-line estimate
over degrees is orders of magnitude below any path length, so A* stays optimal on it.

`network`: 58 locations keyed by short ids and grouped by category, joined by paths that
carry metres, a path type and walking minutes. No coordinates are recorded, so A* runs
uninformed on it.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from campus_nav.domain.entities.geography import Edge, Node


@dataclass(frozen=True)
class TableSource:
    node_rows: tuple[Node, ...]
    edge_rows: tuple[Edge, ...]

    def nodes(self) -> Iterator[Node]:
        return iter(self.node_rows)

    def edges(self) -> Iterator[Edge]:
        return iter(self.edge_rows)


# ----------------------- landmarks -----------------------------

_LANDMARKS = [
    ("Main Gate (Okponglo Entrance)", -0.1855, 5.6510),
    ("Balme Library", -0.1983, 5.6506),
    ("Jones Quartey Building (JQB)", -0.1982, 5.6531),
    ("Commonwealth Hall", -0.1996, 5.6558),
    ("Great Hall", -0.1990, 5.6515),
    ("Akuafo Hall", -0.1998, 5.6491),
    ("Central Cafeteria (CC)", -0.1947, 5.6498),
    ("Mensah Sarbah Hall", -0.1995, 5.6458),
    ("UGBS Main Campus", -0.1878, 5.6514),
    ("Volta Hall", -0.1979, 5.6548),
    ("Department of Computer Science", -0.1956, 5.6534),
    ("Legon Hall", -0.2016, 5.6483),
    ("University Stadium", -0.1945, 5.6441),
    ("University Hospital", -0.1865, 5.6429),
    ("Noguchi Memorial Institute", -0.1856, 5.6409),
    ("Night Market", -0.1985, 5.6450),
    ("Diaspora Hostels (Pentagon)", -0.1915, 5.6375),
    ("School of Law", -0.1985, 5.6401),
    ("Jubilee Hall", -0.2007, 5.6433),
    ("Department of Economics", -0.1925, 5.6521),
    ("GCB Bank", -0.1940, 5.6505),
    ("School of Performing Arts", -0.2033, 5.6493),
    ("Cedi Conference Centre", -0.1901, 5.6535),
    ("Department of Psychology", -0.1943, 5.6546),
    ("International Programmes Office", -0.1982, 5.6441),
]

_LANDMARK_PATHS = [
    ("Main Gate (Okponglo Entrance)", "Balme Library", 1400),
    ("Balme Library", "Jones Quartey Building (JQB)", 300),
    ("Commonwealth Hall", "Great Hall", 500),
    ("Akuafo Hall", "Central Cafeteria (CC)", 550),
    ("Mensah Sarbah Hall", "UGBS Main Campus", 1300),
    ("Volta Hall", "Department of Computer Science", 350),
    ("Legon Hall", "University Stadium", 1100),
    ("University Hospital", "Noguchi Memorial Institute", 250),
    ("Night Market", "Diaspora Hostels (Pentagon)", 1100),
    ("School of Law", "Jubilee Hall", 450),
    ("Department of Economics", "Main Gate (Okponglo Entrance)", 750),
    ("Great Hall", "Akuafo Hall", 350),
    ("UGBS Main Campus", "GCB Bank", 650),
    ("Central Cafeteria (CC)", "Balme Library", 400),
    ("Jones Quartey Building (JQB)", "Commonwealth Hall", 400),
    ("University Stadium", "Mensah Sarbah Hall", 600),
    ("Diaspora Hostels (Pentagon)", "School of Law", 850),
    ("Noguchi Memorial Institute", "Main Gate (Okponglo Entrance)", 1100),
    ("Volta Hall", "Legon Hall", 900),
    ("Department of Computer Science", "Central Cafeteria (CC)", 450),
    ("GCB Bank", "Akuafo Hall", 600),
    ("Jubilee Hall", "Night Market", 300),
    ("Balme Library", "Department of Economics", 650),
    ("Great Hall", "Volta Hall", 400),
    ("Main Gate (Okponglo Entrance)", "University Hospital", 950),
    ("School of Performing Arts", "Legon Hall", 250),
    ("Cedi Conference Centre", "UGBS Main Campus", 350),
    ("Department of Psychology", "Balme Library", 600),
    ("International Programmes Office", "Jubilee Hall", 300),
    ("Akuafo Hall", "Commonwealth Hall", 750),
]


def landmark_source() -> TableSource:
    return TableSource(
        tuple(Node.named(name, x, y) for name, x, y in _LANDMARKS),
        tuple(Edge(a, b, float(w)) for a, b, w in _LANDMARK_PATHS),
    )


# ----------------------- network -----------------------------

_CATEGORY = {
    "gate": "gate",
    "admin": "administration",
    "bus": "transport",
    "food": "food",
    "lib": "library",
    "lecture": "lecture",
    "school": "school",
    "hall": "hall",
    "dias": "hall",
    "hostel": "hostel",
    "health": "health",
    "rec": "recreation",
}

_LOCATIONS = {
    "gate1": "Main Gate",
    "gate2": "Okponglo Gate",
    "gate3": "Atomic Gate",
    "gate4": "UGMC Gate",
    "admin1": "Great Hall",
    "admin2": "Registry",
    "admin5": "Post Office",
    "bus1": "Main Bus Stop",
    "bus2": "Night Market Bus Stop",
    "bus3": "Cafeteria Bus Stop",
    "bus4": "JQB Bus Stop",
    "bus5": "UGBS Bus Stop",
    "food1": "Central Cafeteria",
    "food2": "Night Market",
    "food3": "Bush Canteen",
    "food4": "Banking Square",
    "lib1": "Balme Library",
    "lib2": "Law Library",
    "lib3": "Science Library",
    "lib4": "UGBS Library",
    "lecture1": "N Block",
    "lecture2": "Jones Quartey Building (JQB)",
    "lecture3": "Mathematics Department",
    "lecture4": "Chemistry Department",
    "lecture5": "Physics Department",
    "lecture6": "Archaeology Department",
    "lecture7": "Amegashie Auditorium",
    "lecture8": "Busia Hall",
    "school1": "School of Law",
    "school2": "Business School",
    "school3": "School of Engineering",
    "school4": "Physical Sciences",
    "school5": "Biological Sciences",
    "school6": "School of Arts",
    "school7": "School of Languages",
    "school8": "School of Education",
    "school9": "Communication Studies",
    "school10": "Social Sciences",
    "hall1": "Legon Hall",
    "hall2": "Akuafo Hall",
    "hall3": "Commonwealth Hall",
    "hall4": "Volta Hall",
    "hall5": "Mensah Sarbah Hall",
    "dias1": "Kwapong Hall",
    "dias2": "Limann Hall",
    "dias3": "Jean Nelson Hall",
    "dias4": "Elizabeth Sey Hall",
    "hostel1": "Pentagon Hostel",
    "hostel2": "Evandy Hostel",
    "hostel3": "TF Hostel",
    "hostel4": "Bani Hostel",
    "hostel5": "International Students Hostel 1",
    "hostel6": "International Students Hostel 2",
    "health1": "Legon Hospital",
    "health2": "UGMC",
    "health3": "Pharmacy",
    "rec1": "Legon Gardens",
    "rec2": "Commonwealth Garden",
}

PAVED, ROAD, FOOT = "paved_walkway", "road", "footpath"

# (source, target, metres, path type, minutes)
_NETWORK_PATHS = [
    # gates
    ("gate1", "admin1", 320, PAVED, 4),
    ("gate1", "bus1", 25, PAVED, 1),
    ("gate1", "gate2", 450, ROAD, 6),
    ("gate1", "food4", 200, PAVED, 3),
    ("gate2", "school2", 350, ROAD, 5),
    ("gate2", "hostel1", 400, ROAD, 6),
    ("gate3", "health2", 150, PAVED, 2),
    ("gate3", "rec1", 600, FOOT, 9),
    ("gate4", "health2", 50, PAVED, 1),
    ("gate4", "lecture5", 300, PAVED, 4),
    ("gate4", "school5", 350, PAVED, 5),
    ("gate4", "dias4", 500, ROAD, 7),
    # academic core
    ("admin1", "admin2", 80, PAVED, 1),
    ("admin1", "lib1", 180, PAVED, 2),
    ("admin1", "lecture7", 250, PAVED, 3),
    ("lib1", "lib2", 120, PAVED, 2),
    ("lib1", "lib3", 350, PAVED, 5),
    ("lib1", "lecture1", 200, PAVED, 3),
    ("lib1", "health3", 90, PAVED, 1),
    ("lecture1", "lecture2", 150, PAVED, 2),
    ("lecture2", "lecture3", 100, PAVED, 1),
    ("lecture2", "bus4", 50, PAVED, 1),
    ("lecture3", "lecture4", 120, PAVED, 2),
    ("lecture4", "lecture5", 80, PAVED, 1),
    ("lecture5", "school4", 150, PAVED, 2),
    ("lecture6", "school6", 200, PAVED, 3),
    ("lecture7", "lecture8", 180, PAVED, 2),
    ("lecture8", "school8", 220, PAVED, 3),
    ("lecture2", "school1", 300, PAVED, 4),
    # halls and hostels
    ("hall1", "hall2", 350, PAVED, 5),
    ("hall1", "food1", 400, PAVED, 6),
    ("hall2", "rec2", 250, FOOT, 4),
    ("hall3", "food2", 200, FOOT, 3),
    ("hall3", "bus2", 180, PAVED, 2),
    ("hall4", "school7", 300, PAVED, 4),
    ("hall5", "food3", 180, FOOT, 2),
    ("dias1", "dias2", 150, PAVED, 2),
    ("dias2", "dias3", 120, PAVED, 2),
    ("dias3", "dias4", 100, PAVED, 1),
    ("dias4", "hostel1", 250, PAVED, 4),
    ("hostel1", "hostel2", 200, PAVED, 3),
    ("hostel2", "hostel3", 180, PAVED, 3),
    ("hostel3", "hostel4", 150, PAVED, 2),
    ("hostel4", "hostel5", 300, PAVED, 5),
    ("hostel5", "hostel6", 250, PAVED, 4),
    ("hostel1", "school2", 400, ROAD, 6),
    ("hostel3", "food4", 350, PAVED, 5),
    ("hostel6", "school10", 200, PAVED, 3),
    # schools
    ("school1", "school10", 250, PAVED, 3),
    ("school2", "lib4", 100, PAVED, 1),
    ("school2", "bus5", 40, PAVED, 1),
    ("school3", "lecture5", 180, PAVED, 2),
    ("school4", "school5", 150, PAVED, 2),
    ("school5", "health1", 400, PAVED, 6),
    ("school6", "school7", 120, PAVED, 2),
    ("school7", "school8", 200, PAVED, 3),
    ("school8", "school9", 180, PAVED, 3),
    ("school9", "school10", 220, PAVED, 3),
    ("school3", "school4", 300, PAVED, 4),
    ("school6", "lecture6", 150, PAVED, 2),
    ("school9", "lib3", 250, PAVED, 4),
    ("school10", "dias1", 350, PAVED, 5),
    ("school4", "lecture4", 200, PAVED, 3),
    # health and services
    ("health1", "health2", 600, ROAD, 8),
    ("health1", "gate4", 400, PAVED, 5),
    ("health1", "health3", 120, PAVED, 2),
    ("health2", "gate3", 150, PAVED, 2),
    ("health3", "lib1", 90, PAVED, 1),
    ("health3", "food1", 180, PAVED, 3),
    ("health1", "school5", 400, PAVED, 6),
    ("health2", "school3", 500, ROAD, 7),
    # food and transport
    ("food1", "food2", 150, PAVED, 2),
    ("food2", "bus2", 30, PAVED, 1),
    ("food3", "hall5", 180, FOOT, 2),
    ("food4", "gate1", 200, PAVED, 3),
    ("bus1", "admin1", 300, PAVED, 4),
    ("bus3", "food1", 50, PAVED, 1),
    ("bus4", "lecture2", 50, PAVED, 1),
    ("bus5", "school2", 40, PAVED, 1),
    ("food1", "admin5", 100, PAVED, 2),
    ("food3", "hostel3", 250, FOOT, 4),
    # recreation
    ("rec1", "rec2", 700, FOOT, 10),
    ("rec1", "gate3", 600, FOOT, 9),
]


def _category(node_id: str) -> str:
    return _CATEGORY[node_id.rstrip("0123456789")]


def network_source() -> TableSource:
    return TableSource(
        tuple(Node(nid, name, category=_category(nid)) for nid, name in _LOCATIONS.items()),
        tuple(Edge(a, b, float(m), mins, kind) for a, b, m, kind, mins in _NETWORK_PATHS),
    )


DATASETS = {
    "landmarks": landmark_source,
    "network": network_source,
}
