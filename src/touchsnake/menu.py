# menu.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import BG, BUTTON, TEXT
from .game import Outcome

# Posted by the loop thread when a session ends; handled on the main thread
RETURN_TO_MENU = pygame.event.custom_type()


class EventNavigator:
    """Leaves the play screen by posting RETURN_TO_MENU to the event queue."""

    def return_to_menu(self, outcome: Outcome, score: int) -> None:
        pygame.event.post(pygame.event.Event(RETURN_TO_MENU, outcome=outcome, score=score))


class MenuScreen:
    """Title, a Play button and the result of the last session."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font):
        self.screen = screen
        self.font = font
        self.last_result: Optional[Tuple[Outcome, int]] = None

        w, h = screen.get_size()
        self.play_button = pygame.Rect(0, 0, w // 2, max(h // 10, 40))
        self.play_button.center = (w // 2, h // 2)

    def hit_play(self, pos: Tuple[float, float]) -> bool:
        return self.play_button.collidepoint(int(pos[0]), int(pos[1]))

    def draw(self) -> None:
        w, h = self.screen.get_size()
        self.screen.fill(BG)

        title = self.font.render("Snake", True, TEXT)
        self.screen.blit(title, title.get_rect(center=(w // 2, h // 4)))

        pygame.draw.rect(self.screen, BUTTON, self.play_button)
        label = self.font.render("Play", True, TEXT)
        self.screen.blit(label, label.get_rect(center=self.play_button.center))

        if self.last_result is not None:
            outcome, score = self.last_result
            msg = "You filled the board!" if outcome is Outcome.WON else "Game over"
            line = self.font.render(f"{msg}  Score: {score}", True, TEXT)
            self.screen.blit(line, line.get_rect(center=(w // 2, h * 3 // 4)))

        pygame.display.flip()
