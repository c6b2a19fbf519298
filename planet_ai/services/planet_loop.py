"""Planet actor — the single loop that owns a planet's state.

Orchestrator and explorer messages arrive on two independent asyncio queues.
The loop waits on both at once but handles one message at a time, so the
planet state is only ever touched by this coroutine.

Lifecycle:
  - A planet starts stopped.  While stopped only StartPlanetAI, StopPlanetAI
    and KillPlanet are acted on; everything else is dropped.
  - StartPlanetAI / StopPlanetAI toggle the AI and are acknowledged.
  - KillPlanet is acknowledged and ends the loop.

Replies are put on the outbound queues without waiting.  A full outbound
queue raises asyncio.QueueFull out of the loop.
"""

from __future__ import annotations

import asyncio
import logging

from planet_ai.models.planet_ai import PlanetAI
from planet_ai.models.planet_state import PlanetState
from planet_ai.schemas.orchestrator import (
    KillPlanet,
    KillPlanetResult,
    StartPlanetAI,
    StartPlanetAIResult,
    StopPlanetAI,
    StopPlanetAIResult,
)
from planet_ai.services.production_service import Combinator, Generator
from planet_ai.services.request_router import handle_explorer_msg, handle_orchestrator_msg

logger = logging.getLogger(__name__)


class Planet:
    def __init__(
        self,
        state: PlanetState,
        ai: PlanetAI,
        generator: Generator,
        combinator: Combinator,
        from_orchestrator: asyncio.Queue,
        to_orchestrator: asyncio.Queue,
        from_explorer: asyncio.Queue,
        to_explorer: asyncio.Queue,
    ) -> None:
        self.state = state
        self.ai = ai
        self.generator = generator
        self.combinator = combinator
        self.from_orchestrator = from_orchestrator
        self.to_orchestrator = to_orchestrator
        self.from_explorer = from_explorer
        self.to_explorer = to_explorer

    @property
    def id(self) -> int:
        return self.state.id()

    @property
    def running(self) -> bool:
        return self.ai.running

    async def run(self) -> None:
        """Process messages from both queues until a KillPlanet arrives."""
        logger.info("Planet %s: loop started", self.id)
        orchestrator_get = asyncio.ensure_future(self.from_orchestrator.get())
        explorer_get = asyncio.ensure_future(self.from_explorer.get())
        try:
            while True:
                done, _ = await asyncio.wait(
                    {orchestrator_get, explorer_get},
                    return_when=asyncio.FIRST_COMPLETED,
                )
                # Orchestrator first when both queues woke us up together.
                if orchestrator_get in done:
                    if not self.handle_orchestrator(orchestrator_get.result()):
                        if explorer_get in done:
                            logger.warning(
                                "Planet %s: killed, dropping %s",
                                self.id,
                                type(explorer_get.result()).__name__,
                            )
                        break
                    orchestrator_get = asyncio.ensure_future(self.from_orchestrator.get())
                if explorer_get in done:
                    self.handle_explorer(explorer_get.result())
                    explorer_get = asyncio.ensure_future(self.from_explorer.get())
        finally:
            orchestrator_get.cancel()
            explorer_get.cancel()
            logger.info("Planet %s: loop stopped", self.id)

    def handle_orchestrator(self, msg) -> bool:
        """Handle one orchestrator message; return False once the planet is killed."""
        if isinstance(msg, KillPlanet):
            self.ai.running = False
            self.to_orchestrator.put_nowait(KillPlanetResult(planet_id=self.id))
            logger.info("Planet %s: killed", self.id)
            return False

        if isinstance(msg, StartPlanetAI):
            handle_orchestrator_msg(self.ai, self.state, self.generator, self.combinator, msg)
            self.to_orchestrator.put_nowait(StartPlanetAIResult(planet_id=self.id))
            logger.info("Planet %s: AI started", self.id)
            return True

        if isinstance(msg, StopPlanetAI):
            handle_orchestrator_msg(self.ai, self.state, self.generator, self.combinator, msg)
            self.to_orchestrator.put_nowait(StopPlanetAIResult(planet_id=self.id))
            logger.info("Planet %s: AI stopped", self.id)
            return True

        if not self.ai.running:
            logger.debug("Planet %s: AI stopped, dropping %s", self.id, type(msg).__name__)
            return True

        reply = handle_orchestrator_msg(self.ai, self.state, self.generator, self.combinator, msg)
        if reply is not None:
            self.to_orchestrator.put_nowait(reply)
        return True

    def handle_explorer(self, msg) -> None:
        if not self.ai.running:
            logger.debug("Planet %s: AI stopped, dropping %s", self.id, type(msg).__name__)
            return

        reply = handle_explorer_msg(self.ai, self.state, self.generator, self.combinator, msg)
        if reply is not None:
            self.to_explorer.put_nowait(reply)
