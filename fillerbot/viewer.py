"""The graphical viewer: follow a game on standard input and draw it."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

import pygame

from fillerbot.canvas import Canvas, Label, render
from fillerbot.viewer_state import HEIGHT, WIDTH, ViewerError, ViewerState

WINDOW_TITLE = "Filler"
_FONT_SIZE = 24
_FRAMES_PER_SECOND = 60

Frame = tuple[Canvas, list[Label]]


def run(state: ViewerState, lines: Iterable[str]) -> Iterator[Frame]:
    """Yield one rendered frame for each piece read from ``lines``.

    Each step reads up to the next piece line, updating ``state``, and
    renders it. Once the input is exhausted a last frame of the final
    board is yielded and the generator stops.
    """
    it = iter(lines)
    while True:
        more = state.read_next(it)
        canvas = Canvas(WIDTH, HEIGHT)
        labels = render(canvas, state)
        yield canvas, labels
        if not more:
            return


def _should_quit(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _show(screen: pygame.Surface, font: pygame.font.Font, frame: Frame) -> None:
    canvas, labels = frame
    image = pygame.image.frombuffer(canvas.to_rgb(), (canvas.width, canvas.height), "RGB")
    screen.blit(image, (0, 0))
    for x, y, color, text in labels:
        screen.blit(font.render(text, True, _rgb(color)), (x, y))
    pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Show the game read from standard input until Escape is pressed."""
    state = ViewerState()
    try:
        state.read_first(sys.stdin)
    except ViewerError as exc:
        print(exc, file=sys.stderr)
        return 1

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, _FONT_SIZE)
        clock = pygame.time.Clock()
        frames: Iterator[Frame] | None = run(state, sys.stdin)
        while True:
            for event in pygame.event.get():
                if _should_quit(event):
                    return 0
            if frames is not None:
                try:
                    frame = next(frames)
                except StopIteration:
                    frames = None
                except ViewerError as exc:
                    print(exc, file=sys.stderr)
                    return 1
                else:
                    _show(screen, font, frame)
            clock.tick(_FRAMES_PER_SECOND)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())