# config.py

from dataclasses import dataclass

@dataclass
class PuzzleConfig:
    # Generation
    circle_count: int = 6
    target_node_count: int = 10

    # Initial placement
    node_starting_distance: float = 100.0
    node_starting_random_offset: float = 20.0

    # Steering
    move_speed: float = 100.0
    target_centre_length: float = 50.0
    field_base: float = 1.05

    # Log field magnitudes at the probe point
    debug_print: bool = False

    def validate(self) -> "PuzzleConfig":
        if self.circle_count < 2:
            raise ValueError(f"circle_count must be >= 2, got {self.circle_count}")
        if self.target_node_count < 1:
            raise ValueError(f"target_node_count must be >= 1, got {self.target_node_count}")
        if self.node_starting_distance <= 0:
            raise ValueError(f"node_starting_distance must be > 0, got {self.node_starting_distance}")
        if not 0 <= self.node_starting_random_offset < self.node_starting_distance:
            raise ValueError(
                "node_starting_random_offset must be in [0, node_starting_distance), "
                f"got {self.node_starting_random_offset}"
            )
        if self.move_speed < 0:
            raise ValueError(f"move_speed must be >= 0, got {self.move_speed}")
        if self.target_centre_length < 0:
            raise ValueError(f"target_centre_length must be >= 0, got {self.target_centre_length}")
        if self.field_base <= 0:
            raise ValueError(f"field_base must be > 0, got {self.field_base}")
        return self
