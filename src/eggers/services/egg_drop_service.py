"""Turns entity removal events into spawn egg drops."""
from __future__ import annotations

import logging
from typing import List

from eggers.core.rng import RNG
from eggers.domain.world import EggCatalog, EntityRemovedEvent, ItemDrop, ItemSpawner
from eggers.services.config_manager import ConfigManager
from eggers.services.drop_engine import UniformSource, compute_drops

logger = logging.getLogger(__name__)


class EggDropService:
    """Handles removal events on the simulation path.

    The chance lookup happens under the config lock; rolling and spawning
    happen outside it.
    """

    def __init__(
        self,
        *,
        config_manager: ConfigManager,
        catalog: EggCatalog,
        spawner: ItemSpawner,
        rng: UniformSource | None = None,
    ) -> None:
        self._config_manager = config_manager
        self._catalog = catalog
        self._spawner = spawner
        self._rng = rng if rng is not None else RNG()

    def handle_entity_removed(self, event: EntityRemovedEvent) -> List[ItemDrop]:
        with self._config_manager.transaction() as config:
            chance = config.get_drop_chance(event.entity_type)
            warn_on_no_egg = config.warn_on_no_egg
        if chance is None:
            return []

        drops: List[ItemDrop] = []
        for _ in compute_drops(chance, self._rng):
            if not self._catalog.has_spawn_egg(event.entity_type):
                if warn_on_no_egg:
                    logger.warning(
                        "%s does not have a spawn egg, but you have it set in your config!",
                        event.entity_type,
                    )
                continue
            drops.append(ItemDrop(entity_type=event.entity_type, position=event.position))

        if drops:
            self._spawner.spawn_items(drops)
            logger.debug("Dropped %d %s egg(s) at %s", len(drops), event.entity_type, event.position)
        return drops
