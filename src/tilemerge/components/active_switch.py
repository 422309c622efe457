from dataclasses import dataclass

@dataclass(slots=True)
class ActiveSwitch:
    """Per-cell occupancy flag.

    active: True if the cell currently holds a tile; False if empty.
    The tile's number lives in a separate TileValue component and is
    ignored while the switch is off.
    """
    active: bool = False
