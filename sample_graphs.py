# sample_graphs.py
import random
from typing import List, Tuple

from graph_model import Graph

CAMPUS_VERTICES: List[str] = [
    "Gate", "Student Parking", "Senior Parking", "Circle", "Admissions",
    "Business Office", "Athletics", "PA", "Cohen", "Fountain", "US 100",
    "Faculty Parking", "Library", "CHH", "VA", "Mariani", "Science", "BD", "GD",
]

CAMPUS_EDGES: List[Tuple[str, str]] = [
    ("Gate", "Student Parking"), ("Gate", "Circle"), ("Gate", "Senior Parking"),
    ("Student Parking", "Circle"), ("Student Parking", "Athletics"), ("Student Parking", "PA"),
    ("Senior Parking", "Circle"), ("Senior Parking", "Admissions"), ("Senior Parking", "Business Office"),
    ("Circle", "Admissions"), ("Circle", "PA"), ("Circle", "Cohen"),
    ("Admissions", "Fountain"), ("Admissions", "Business Office"),
    ("Business Office", "US 100"), ("Business Office", "Fountain"),
    ("Athletics", "PA"), ("Athletics", "Science"),
    ("PA", "Cohen"), ("PA", "Mariani"), ("PA", "Science"),
    ("Cohen", "Mariani"), ("Cohen", "Fountain"), ("Cohen", "Library"),
    ("Fountain", "US 100"), ("Fountain", "Library"),
    ("US 100", "Library"), ("US 100", "Faculty Parking"), ("US 100", "CHH"),
    ("Faculty Parking", "VA"), ("Faculty Parking", "CHH"),
    ("Library", "CHH"), ("Library", "Mariani"),
    ("CHH", "VA"), ("CHH", "GD"),
    ("VA", "GD"), ("VA", "Mariani"),
    ("Mariani", "Science"), ("Mariani", "BD"), ("Mariani", "GD"),
    ("Science", "BD"), ("BD", "GD"),
]

MIN_WEIGHT = 1
MAX_WEIGHT = 8


def campus_graph(directed: bool = False, seed: int = 42) -> Graph:
    """Campus map used by the visualizer, with seeded integer weights in 1..8."""
    rng = random.Random(seed)
    graph = Graph(CAMPUS_VERTICES, directed=directed)
    for u, v in CAMPUS_EDGES:
        graph.add_edge(u, v, rng.randint(MIN_WEIGHT, MAX_WEIGHT))
    return graph
