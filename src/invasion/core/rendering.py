"""
Graphviz (DOT) rendering of generated grid maps.

Every grid cell becomes a node named ``N<row>_<col>``. Invisible scaffolding
edges and ``rank=same`` rows keep the nodes laid out as a grid, empty cells
are hidden, and each road is drawn once as a solid edge.
"""

from __future__ import annotations

from string import Template

from invasion.core.map_generators import GridMap

DOT_TEMPLATE = Template("""\
graph G {
    splines=false
    nodesep=0.6
    ranksep=0.6
    node [shape=box, style=filled, fillcolor="white", fixedsize=true, width=1.2]
    edge [style=invis]

$vertical_edges
$horizontal_edges
$hidden_nodes
$roads
$labels
}
""")

HIGHLIGHT_COLOR = "red"


def _node(r: int, c: int) -> str:
    return f"N{r}_{c}"


def render_dot(grid_map: GridMap) -> str:
    """Render a grid map as a DOT document."""
    grid = grid_map.grid
    height, width = grid_map.height, grid_map.width

    vertical_edges = [
        " -- ".join(_node(r, c) for r in range(height))
        for c in range(width)
    ]
    horizontal_edges = [
        "rank=same {%s}" % " -- ".join(_node(r, c) for c in range(width))
        for r in range(height)
    ]
    hidden_nodes = [
        f"{_node(r, c)} [style=invis]"
        for r in range(height)
        for c in range(width)
        if grid[r][c] is None
    ]

    # a road is drawn from whichever end is visited first
    roads: list[str] = []
    drawn: set[str] = set()
    for r in range(height):
        for c in range(width):
            city = grid[r][c]
            if city is None:
                continue
            for neighbor in grid_map.world.neighbors(city).cities():
                if neighbor in drawn or neighbor not in grid_map.coordinates:
                    continue
                nr, nc = grid_map.coordinates[neighbor]
                roads.append(f"{_node(r, c)} -- {_node(nr, nc)} [style=solid]")
            drawn.add(city)

    labels = [
        f'{_node(r, c)} [label="{grid[r][c]}"]'
        for r in range(height)
        for c in range(width)
        if grid[r][c] is not None
    ]

    return DOT_TEMPLATE.substitute(
        vertical_edges="\n".join(vertical_edges),
        horizontal_edges="\n".join(horizontal_edges),
        hidden_nodes="\n".join(hidden_nodes),
        roads="\n".join(roads),
        labels="\n".join(labels),
    )


def highlight_cities(dot: str, cities: list[str], color: str = HIGHLIGHT_COLOR) -> str:
    """Fill the nodes labeled with ``cities`` in ``color``.

    A plain text patch on ``[label="<city>"]``; the first match per city is
    rewritten and unknown cities are ignored.
    """
    for city in cities:
        old_attrs = f'[label="{city}"]'
        new_attrs = f'[label="{city}", fillcolor="{color}"]'
        dot = dot.replace(old_attrs, new_attrs, 1)
    return dot
