"""
    Force-directed layout (Fruchterman-Reingold style).

    Nodes are point masses that repel each other; edges are springs that
    pull their endpoints together.  The simulation runs until the largest
    step of an iteration falls below ``min_displacement`` or the iteration
    cap is hit.  Starting positions are deterministic, so the same graph
    always settles in the same place.
"""
import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

from editor_api.types import Identifier

Point = Tuple[float, float]


@dataclass
class LayoutSettings:
    """
    Attributes:
        spring_length:    Ideal edge length; also scales the repulsion.
        max_iterations:   Hard cap on simulation steps.
        min_displacement: Convergence threshold on the largest step.
        cooling:          Factor applied to the temperature after each step.
    """
    spring_length: float = 120.0
    max_iterations: int = 500
    min_displacement: float = 0.05
    cooling: float = 0.95


class ForceLayout:

    def __init__(self, settings: LayoutSettings = None):
        self.settings = settings or LayoutSettings()
        self._nodes: List[Identifier] = []
        self._springs: List[Tuple[Identifier, Identifier]] = []
        self.iterations_run = 0
        self.converged = False

    def add_node(self, node_id: Identifier) -> None:
        self._nodes.append(node_id)

    def add_spring(self, from_id: Identifier, to_id: Identifier) -> None:
        # Self-loops exert no force on their node
        if from_id != to_id:
            self._springs.append((from_id, to_id))

    def _initial_positions(self) -> Dict[Identifier, List[float]]:
        count = len(self._nodes)
        radius = self.settings.spring_length * math.sqrt(count) / 2
        positions = {}
        for i, node_id in enumerate(self._nodes):
            angle = 2 * math.pi * i / max(count, 1)
            positions[node_id] = [radius * math.cos(angle), radius * math.sin(angle)]
        return positions

    def run(self) -> Dict[Identifier, Point]:
        """Simulate and return the settled position of every node."""
        k = self.settings.spring_length
        positions = self._initial_positions()
        temperature = k
        self.iterations_run = 0
        self.converged = len(self._nodes) < 2

        while not self.converged and self.iterations_run < self.settings.max_iterations:
            disp = {node_id: [0.0, 0.0] for node_id in self._nodes}

            # Repulsion between every pair
            for i, a in enumerate(self._nodes):
                for b in self._nodes[i + 1:]:
                    dx = positions[a][0] - positions[b][0]
                    dy = positions[a][1] - positions[b][1]
                    dist = math.hypot(dx, dy)
                    if dist < 1e-6:
                        # coincident points: push apart along a fixed axis
                        dx, dy, dist = 0.01, 0.0, 0.01
                    force = k * k / dist
                    disp[a][0] += dx / dist * force
                    disp[a][1] += dy / dist * force
                    disp[b][0] -= dx / dist * force
                    disp[b][1] -= dy / dist * force

            # Attraction along springs
            for from_id, to_id in self._springs:
                dx = positions[from_id][0] - positions[to_id][0]
                dy = positions[from_id][1] - positions[to_id][1]
                dist = math.hypot(dx, dy)
                if dist < 1e-6:
                    continue
                force = dist * dist / k
                disp[from_id][0] -= dx / dist * force
                disp[from_id][1] -= dy / dist * force
                disp[to_id][0] += dx / dist * force
                disp[to_id][1] += dy / dist * force

            largest_step = 0.0
            for node_id in self._nodes:
                dx, dy = disp[node_id]
                length = math.hypot(dx, dy)
                if length == 0:
                    continue
                step = min(length, temperature)
                positions[node_id][0] += dx / length * step
                positions[node_id][1] += dy / length * step
                largest_step = max(largest_step, step)

            temperature *= self.settings.cooling
            self.iterations_run += 1
            self.converged = largest_step < self.settings.min_displacement

        return {node_id: (pos[0], pos[1]) for node_id, pos in positions.items()}
