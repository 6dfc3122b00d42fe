"""Demo entry point: build an inventory, place one item, print both states."""

import argparse
import logging
import sys
from dataclasses import replace

from slot_inventory import __version__
from slot_inventory.collections import Inventory
from slot_inventory.config import DEMO, DemoConfig
from slot_inventory.entity import Item
from slot_inventory.errors import ContainerError

logger = logging.getLogger("slot_inventory")


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def run(config: DemoConfig) -> Inventory:
    inv = Inventory.with_capacity(config.capacity)
    print(repr(inv))
    inv.add_at(Item(config.identifier, config.quantity), config.slot)
    print(repr(inv))
    return inv


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="slot-inventory",
        description="Place one item into a fresh inventory and print it",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--capacity", type=int, default=DEMO.capacity, help="Number of slots")
    parser.add_argument("--slot", type=int, default=DEMO.slot, help="Slot to place the item in")
    parser.add_argument("--identifier", type=int, default=DEMO.identifier, help="Item identifier")
    parser.add_argument("--quantity", type=int, default=DEMO.quantity, help="Item quantity")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    config = replace(
        DEMO,
        capacity=args.capacity,
        slot=args.slot,
        identifier=args.identifier,
        quantity=args.quantity,
    )
    logger.info("Running demo with %s", config)
    try:
        run(config)
    except (ContainerError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
