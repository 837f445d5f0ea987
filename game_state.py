import logging
import random
from enum import Enum, auto

from config import SPAWN_INTERVAL_FRAMES
from objects import Obstacle, Player, Playfield


logger = logging.getLogger(__name__)


class GameMode(Enum):
    INIT = auto()
    PLAYING = auto()
    ENDED = auto()
    RELOAD = auto()


class GameState:
    # frames is advanced by the caller once per tick; update and check only read it
    def __init__(
        self,
        playfield: Playfield,
        rng: random.Random | None = None,
        spawn_interval: int = SPAWN_INTERVAL_FRAMES,
    ) -> None:
        self.playfield = playfield
        self.rng = rng or random.Random()
        self.spawn_interval = spawn_interval
        self.player = Player(0, 0, playfield)
        self.obstacles: list[Obstacle] = []
        self.frames = 0
        self.score = 0
        self.mode = GameMode.INIT

    def init(self) -> None:
        self.player = Player(0, 0, self.playfield)
        self.obstacles = []
        self.frames = 0
        self.score = 0
        self.mode = GameMode.PLAYING
        logger.info("New game on a %dx%d playfield", self.playfield.width, self.playfield.height)

    def spawn_obstacle(self) -> Obstacle:
        y = self.rng.randrange(self.playfield.height)
        obstacle = Obstacle(self.playfield.width, y, self.playfield, rng=self.rng)
        self.obstacles.append(obstacle)
        logger.debug("Spawned obstacle r=%.2f at y=%.1f (frame %d)", obstacle.radius, obstacle.y, self.frames)
        return obstacle

    def update(self) -> None:
        if self.frames % self.spawn_interval == 0:
            self.spawn_obstacle()

        for obj in [*self.obstacles, self.player]:
            obj.update()

        for obstacle in list(self.obstacles):
            if obstacle.x == 0:
                self.score += 1
                self.obstacles.remove(obstacle)
                logger.debug("Obstacle passed, score %d", self.score)

    def check(self) -> bool:
        if any(obstacle.is_colliding(self.player) for obstacle in self.obstacles):
            self.mode = GameMode.ENDED
            logger.info("Collision at frame %d, final score %d", self.frames, self.score)
            return True
        return False

    def move_player(self, direction: int) -> None:
        if direction < 0:
            self.player.move_up()
        elif direction > 0:
            self.player.move_down()
