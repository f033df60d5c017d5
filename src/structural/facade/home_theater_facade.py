"""
Facade (Structural)

Intent:
    Provide one simple interface over a set of interfaces in a subsystem,
    so clients do not have to coordinate the subsystem parts themselves.

Participants:
    - Subsystem classes: Amplifier, DVDPlayer, Projector, TheaterLights,
      Screen, PopcornPopper. They know nothing about the facade.
    - Facade: HomeTheaterFacade, which sequences subsystem calls for a goal
      ("watch a movie") in the correct order.

Notes:
    - Subsystems stay usable directly; the facade does not hide them, it
      only makes the common paths short.
"""

from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger(__name__)

__all__ = [
    "Component",
    "Amplifier",
    "DVDPlayer",
    "Projector",
    "TheaterLights",
    "Screen",
    "PopcornPopper",
    "HomeTheaterFacade",
    "build_home_theater",
    "main",
]


# ---------- Subsystem ----------

class Component:
    """Common base for home theater parts."""

    def power_status(self) -> str:
        return "Component is operational"


class Amplifier(Component):
    """Audio amplifier with volume and surround settings."""

    def __init__(self) -> None:
        self.is_on = False
        self.volume = 0
        self.surround = False

    def on(self) -> None:
        self.is_on = True
        logger.info("Amplifier: Powering on...")

    def off(self) -> None:
        self.is_on = False
        logger.info("Amplifier: Shutting down...")

    def set_volume(self, level: int) -> None:
        """
        :param level: Volume level; must be >= 0.
        :raises ValueError: If level is negative.
        """
        if level < 0:
            raise ValueError(f"Volume must be non-negative, got {level}.")
        self.volume = level
        logger.info("Amplifier: Setting volume to %d", level)

    def set_surround_sound(self) -> None:
        self.surround = True
        logger.info("Amplifier: Enabling 5.1 surround sound")


class DVDPlayer(Component):
    """Disc player; remembers the last movie played."""

    def __init__(self) -> None:
        self.is_on = False
        self.movie = ""
        self.playing = False

    def on(self) -> None:
        self.is_on = True
        logger.info("DVD Player: Powering on...")

    def off(self) -> None:
        self.is_on = False
        logger.info("DVD Player: Shutting down...")

    def play(self, movie: str) -> None:
        self.movie = movie
        self.playing = True
        logger.info("DVD Player: Playing '%s'", movie)

    def stop(self) -> None:
        self.playing = False
        logger.info("DVD Player: Stopping playback")

    def eject(self) -> None:
        self.movie = ""
        logger.info("DVD Player: Ejecting disc")


class Projector(Component):
    def __init__(self) -> None:
        self.is_on = False
        self.input_source: Optional[str] = None
        self.widescreen = False

    def on(self) -> None:
        self.is_on = True
        logger.info("Projector: Powering on...")

    def off(self) -> None:
        self.is_on = False
        logger.info("Projector: Shutting down...")

    def set_input(self, source: str) -> None:
        self.input_source = source
        logger.info("Projector: Setting input to %s", source)

    def wide_screen_mode(self) -> None:
        self.widescreen = True
        logger.info("Projector: Setting widescreen mode (16:9)")


class TheaterLights(Component):
    """Dimmable lights; brightness is a percentage."""

    def __init__(self) -> None:
        self.brightness = 100

    def dim(self, level: int) -> None:
        """
        :param level: Target brightness in percent, within [0, 100].
        :raises ValueError: If level is out of range.
        """
        if not 0 <= level <= 100:
            raise ValueError(f"Brightness must be within [0, 100], got {level}.")
        self.brightness = level
        logger.info("Theater Lights: Dimming to %d%%", level)

    def on(self) -> None:
        self.brightness = 100
        logger.info("Theater Lights: Turning on to full brightness")


class Screen(Component):
    def __init__(self) -> None:
        self.position = "up"

    def down(self) -> None:
        self.position = "down"
        logger.info("Screen: Lowering screen")

    def up(self) -> None:
        self.position = "up"
        logger.info("Screen: Raising screen")


class PopcornPopper(Component):
    def __init__(self) -> None:
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        logger.info("Popcorn Popper: Starting...")

    def off(self) -> None:
        self.is_on = False
        logger.info("Popcorn Popper: Shutting off")

    def pop(self) -> None:
        logger.info("Popcorn Popper: Popping corn!")


# ---------- Facade ----------

class HomeTheaterFacade:
    """
    Single entry point for the home theater.

    :param amp: Amplifier.
    :param dvd: DVD player.
    :param projector: Projector.
    :param lights: Theater lights.
    :param screen: Projection screen.
    :param popper: Popcorn popper.
    """

    def __init__(self, amp: Amplifier, dvd: DVDPlayer, projector: Projector,
                 lights: TheaterLights, screen: Screen, popper: PopcornPopper) -> None:
        self.amp = amp
        self.dvd = dvd
        self.projector = projector
        self.lights = lights
        self.screen = screen
        self.popper = popper

    @staticmethod
    def _banner(title: str) -> None:
        logger.info("=" * 40)
        logger.info(title)
        logger.info("=" * 40)

    def watch_movie(self, movie: str) -> None:
        """
        Prepares every subsystem and starts playback.

        :param movie: Title to play.
        """
        self._banner(f"Get ready to watch '{movie}'...")
        self.popper.on()
        self.popper.pop()
        self.lights.dim(10)
        self.screen.down()
        self.projector.on()
        self.projector.wide_screen_mode()
        self.projector.set_input("DVD")
        self.amp.on()
        self.amp.set_volume(5)
        self.amp.set_surround_sound()
        self.dvd.on()
        self.dvd.play(movie)
        logger.info("... Movie is now playing! Enjoy! ...")

    def end_movie(self) -> None:
        """Stops playback and shuts the theater down."""
        self._banner("Shutting down movie theater...")
        self.popper.off()
        self.lights.on()
        self.screen.up()
        self.projector.off()
        self.amp.off()
        self.dvd.stop()
        self.dvd.eject()
        self.dvd.off()
        logger.info("... Theater shut down complete! ...")

    def listen_to_radio(self, station: str) -> None:
        self._banner(f"Tuning to radio station {station}...")
        self.lights.on()
        self.amp.on()
        self.amp.set_volume(3)
        logger.info("Radio: Tuned to %s FM", station)
        logger.info("... Radio is playing! ...")


def build_home_theater() -> HomeTheaterFacade:
    """
    Creates the subsystem parts and wires them into a facade.

    :return: Ready-to-use HomeTheaterFacade.
    """
    return HomeTheaterFacade(
        amp=Amplifier(),
        dvd=DVDPlayer(),
        projector=Projector(),
        lights=TheaterLights(),
        screen=Screen(),
        popper=PopcornPopper(),
    )


def main() -> HomeTheaterFacade:
    logger.info("=" * 60)
    logger.info("FACADE PATTERN DEMONSTRATION - Home Theater System")
    logger.info("=" * 60)

    home_theater = build_home_theater()
    home_theater.watch_movie("The Matrix")

    logger.info("INTERMISSION - Theater is running...")
    home_theater.end_movie()

    logger.info("BONUS FEATURE - Radio Mode")
    home_theater.listen_to_radio("101.5")
    return home_theater


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    main()
