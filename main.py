"""Headless demo: expand a selector, rotate it and log what a host would draw."""

import asyncio
import os

from swipe_selector.adapters import create_animation_driver
from swipe_selector.core.logging import configure_logging, get_logger
from swipe_selector.core.selector import ChangeEvent, ItemSpec, Selector

# Configure structured logging (reads ENVIRONMENT and LOG_LEVEL from env)
configure_logging()

logger = get_logger(__name__)


def log_frame(selector: Selector) -> None:
    """Log every item in draw order with its rendered geometry."""
    for depth, item in enumerate(selector.collate_for_render()):
        x, y = item.position
        scale_x, _ = item.size_scale
        logger.info(
            "item_rendered",
            depth=depth,
            payload=item.payload,
            slot=item.current_index,
            x=round(x, 1),
            y=round(y, 1),
            scale=round(scale_x, 3),
            opacity=round(item.alpha, 3),
            descriptor_opacity=round(item.descriptor_alpha, 3),
        )


async def main() -> None:
    """Build a selector on the event loop and play a few transitions."""
    item_count = int(os.getenv("SELECTOR_ITEMS", "7"))
    target = int(os.getenv("SELECTOR_TARGET", "3")) % item_count

    driver = create_animation_driver("asyncio")

    def on_change(event: ChangeEvent) -> None:
        logger.info("current_item_changed", index=event.index, payload=event.item.payload)

    items = [
        ItemSpec(f"item-{i}", key=f"item-{i}", descriptor=f"Item {i}")
        for i in range(item_count)
    ]
    selector = Selector(
        items,
        driver,
        {"show": 5, "hide": True, "transitionDuration": 600},
        on_change=on_change,
    )

    selector.expand_items()
    await driver.wait_idle()
    log_frame(selector)

    selector.transition_to(target)
    await driver.wait_idle()
    log_frame(selector)

    selector.on_drag_start()
    selector.on_drag_move((-60.0, 0.0))
    selector.on_drag_end((-160.0, 0.0))
    await driver.wait_idle()
    log_frame(selector)

    driver.close()


if __name__ == "__main__":
    asyncio.run(main())
