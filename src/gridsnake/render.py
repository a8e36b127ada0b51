# render.py
from typing import Tuple
import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, CELL_GAP, BOARD_PAD, HEADER_H, BOARD_PX,
    BG, PANEL, CELL, CELL_EDGE, SNAKE, FOOD as FOOD_COLOR, TITLE, TEXT, LIGHT,
    GAME_OVER, HELP_PANEL, DARK,
)
from .game import GamePhase, Snapshot, BODY, HEAD, FOOD

INSTRUCTIONS = (
    "How to Play:",
    "Use the arrow keys to move the snake.",
    "Eat the food (cyan square) to grow and earn points!",
    "Avoid colliding with the walls or yourself!",
    "SPACE start   P pause   R reset   I close",
)


# ---------- Helpers ----------
def cell_rect(gx: int, gy: int) -> pygame.Rect:
    left = BOARD_PAD + BOARD_PAD + gx * (CELL_SIZE + CELL_GAP)
    top = HEADER_H + BOARD_PAD + gy * (CELL_SIZE + CELL_GAP)
    return pygame.Rect(left, top, CELL_SIZE, CELL_SIZE)

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, cell_rect(gx, gy))

def _blit_center(screen: pygame.Surface, font: pygame.font.Font, text: str,
                 color: Tuple[int, int, int], center: Tuple[int, int]) -> None:
    surf = font.render(text, True, color)
    screen.blit(surf, surf.get_rect(center=center))

def _panel(screen: pygame.Surface, color: Tuple[int, int, int], height: int) -> pygame.Rect:
    rect = pygame.Rect(0, 0, WIDTH - 4 * BOARD_PAD, height)
    rect.center = (WIDTH // 2, HEADER_H + BOARD_PX // 2)
    pygame.draw.rect(screen, color, rect, border_radius=6)
    return rect


# ---------- Draw ----------
def draw_board(screen: pygame.Surface, snap: Snapshot) -> None:
    board = pygame.Rect(BOARD_PAD, HEADER_H, BOARD_PX, BOARD_PX)
    pygame.draw.rect(screen, DARK, board, border_radius=8)
    grid = snap.to_grid()
    for gy in range(snap.grid_size):
        for gx in range(snap.grid_size):
            code = grid[gy, gx]
            if code in (BODY, HEAD):
                draw_cell(screen, gx, gy, SNAKE)
            elif code == FOOD:
                draw_cell(screen, gx, gy, FOOD_COLOR)
            else:
                rect = cell_rect(gx, gy)
                pygame.draw.rect(screen, CELL, rect)
                pygame.draw.rect(screen, CELL_EDGE, rect, width=1)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    screen.fill(BG)
    title = font.render("Snake Game", True, TITLE)
    screen.blit(title, (BOARD_PAD, (HEADER_H - title.get_height()) // 2))
    draw_board(screen, snap)

    footer_top = HEADER_H + BOARD_PX
    _blit_center(screen, font, f"Score: {snap.score}", TEXT, (WIDTH // 2, footer_top + 18))
    _blit_center(screen, font, f"High Score: {snap.high_score}", TEXT, (WIDTH // 2, footer_top + 44))

    if snap.phase is GamePhase.PAUSE:
        _blit_center(screen, font, "PAUSED", LIGHT, (WIDTH - 3 * BOARD_PAD, HEADER_H // 2))

def draw_instructions(screen: pygame.Surface, font: pygame.font.Font) -> None:
    rect = _panel(screen, HELP_PANEL, 28 * len(INSTRUCTIONS) + 24)
    for i, line in enumerate(INSTRUCTIONS):
        surf = font.render(line, True, DARK)
        screen.blit(surf, (rect.left + 12, rect.top + 12 + 28 * i))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    rect = _panel(screen, GAME_OVER, 120)
    _blit_center(screen, font, "Game Over!", DARK, (rect.centerx, rect.top + 28))
    _blit_center(screen, font, f"Your Score: {score}", DARK, (rect.centerx, rect.top + 60))
    _blit_center(screen, font, "Press ENTER to start again", PANEL, (rect.centerx, rect.top + 92))

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot,
               show_instructions: bool) -> None:
    draw_game(screen, font, snap)
    if snap.phase is GamePhase.GAME_OVER:
        draw_game_over(screen, font, snap.score)
    elif show_instructions:
        draw_instructions(screen, font)
