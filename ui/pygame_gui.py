from __future__ import annotations

import logging

import pygame
from pygame import gfxdraw

from engine.game import CheckersGame, TapOutcome
from engine.pieces import Color, Piece
from engine.position import Position

logger = logging.getLogger(__name__)


class CheckersGUI:
    def __init__(self, game: CheckersGame, square_size: int = 80, info_height: int = 150) -> None:
        self.game = game
        self.square_size = square_size
        self.board_size = self.game.board.boardSize
        self.board_pixels = self.square_size * self.board_size
        self.info_height = info_height

        self.margin = 40
        self.window_width = self.board_pixels + self.margin * 2
        self.window_height = self.board_pixels + self.info_height + self.margin * 2

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Checkers Game")

        self.font = pygame.font.SysFont("arial", 24)
        self.small_font = pygame.font.SysFont("arial", 16)
        self.title_font = pygame.font.SysFont("arial", 28, bold=True)
        self.king_font = pygame.font.SysFont("arial", 22, bold=True)
        self.clock = pygame.time.Clock()

        self.destinations: set[Position] = set()
        self.hover_cell: Position | None = None
        self.piece_surfaces: dict[tuple[Color, bool], pygame.Surface] = {}

        self.colors = {
            "light": (245, 245, 245),
            "dark": (128, 128, 128),
            "highlight": (246, 227, 90),
            "selected": (252, 142, 80),
            "red_piece": (200, 30, 30),
            "black_piece": (25, 25, 25),
            "outline": (20, 20, 20),
            "background": (30, 34, 45),
            "info_bg": (40, 46, 60),
            "panel_border": (86, 94, 110),
            "text": (230, 230, 230),
            "board_frame": (70, 70, 70),
            "king": (255, 255, 255),
        }

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        self.game.reset()
                        self.destinations.clear()
                elif event.type == pygame.MOUSEMOTION:
                    self.hover_cell = self._board_coords_from_pos(event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            self._draw()
            pygame.display.flip()
            self.clock.tick(60)

    def _handle_click(self, pos: tuple[int, int]) -> TapOutcome | None:
        cell = self._board_coords_from_pos(pos)
        if cell is None:
            return None

        outcome = self.game.tap(cell)
        logger.debug("Tap %s -> %s", cell, outcome.value)
        if outcome == TapOutcome.SELECTED:
            self.destinations = self._build_destinations(cell)
        else:
            self.destinations.clear()
        return outcome

    def _build_destinations(self, start: Position) -> set[Position]:
        return {
            Position(x, y)
            for y in range(self.board_size)
            for x in range(self.board_size)
            if self.game.is_valid_move(start, Position(x, y))
        }

    def _board_coords_from_pos(self, pos: tuple[int, int]) -> Position | None:
        x, y = pos
        x -= self.margin
        y -= self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        return Position(x // self.square_size, y // self.square_size)

    def _draw(self) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board()
        self._draw_selection()
        self._draw_pieces()
        self._draw_info_panel()

    def _draw_board(self) -> None:
        board_rect = pygame.Rect(self.margin, self.margin, self.board_pixels, self.board_pixels)
        frame_rect = board_rect.inflate(20, 20)
        pygame.draw.rect(self.screen, self.colors["board_frame"], frame_rect, border_radius=12)

        for y in range(self.board_size):
            for x in range(self.board_size):
                color = self.colors["light"] if (x + y) % 2 == 0 else self.colors["dark"]
                pygame.draw.rect(self.screen, color, self._rect_for_cell(Position(x, y)))

    def _draw_selection(self) -> None:
        selected = self.game.selected_piece
        if selected is not None:
            rect = self._rect_for_cell(selected.position)
            pygame.draw.rect(self.screen, self.colors["selected"], rect, 4, border_radius=8)

        for dest in self.destinations:
            cx, cy = self._center_for_cell(dest)
            radius = 16 if dest == self.hover_cell else 12
            gfxdraw.filled_circle(self.screen, cx, cy, radius, (*self.colors["highlight"], 140))
            gfxdraw.aacircle(self.screen, cx, cy, radius, self.colors["outline"])

    def _draw_pieces(self) -> None:
        for piece in self.game.board.getAllPieces():
            surface = self._get_piece_surface(piece)
            rect = surface.get_rect(center=self._center_for_cell(piece.position))
            self.screen.blit(surface, rect)

    def _draw_info_panel(self) -> None:
        panel_top = self.margin + self.board_pixels + 30
        info_rect = pygame.Rect(self.margin, panel_top, self.board_pixels, self.info_height - 30)
        pygame.draw.rect(self.screen, self.colors["info_bg"], info_rect, border_radius=16)
        pygame.draw.rect(self.screen, self.colors["panel_border"], info_rect, 2, border_radius=16)

        title = self.title_font.render(
            f"Current Player: {self.game.current_player.label}", True, self.colors["text"]
        )
        self.screen.blit(title, (info_rect.left + 20, info_rect.top + 16))

        stats = []
        for color in (Color.RED, Color.BLACK):
            total, kings = self.game.board.count(color)
            stats.append(f"{color.label}: {total} pieces, {kings} kings")
        lines = ["  |  ".join(stats), "R: Reset  |  Esc/Q: Quit"]
        y_offset = info_rect.top + 60
        for line in lines:
            text_surface = self.small_font.render(line, True, self.colors["text"])
            self.screen.blit(text_surface, (info_rect.left + 24, y_offset))
            y_offset += 22

    def _rect_for_cell(self, position: Position) -> pygame.Rect:
        return pygame.Rect(
            self.margin + position.x * self.square_size,
            self.margin + position.y * self.square_size,
            self.square_size,
            self.square_size,
        )

    def _center_for_cell(self, position: Position) -> tuple[int, int]:
        return self._rect_for_cell(position).center

    def _get_piece_surface(self, piece: Piece) -> pygame.Surface:
        key = (piece.color, piece.is_king)
        if key in self.piece_surfaces:
            return self.piece_surfaces[key]

        diameter = self.square_size - 10
        radius = diameter // 2
        surface = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        cx, cy = surface.get_width() // 2, surface.get_height() // 2

        base = self.colors["red_piece"] if piece.color == Color.RED else self.colors["black_piece"]
        pygame.draw.circle(surface, base, (cx, cy), radius)
        pygame.draw.circle(surface, self.colors["outline"], (cx, cy), radius, 2)

        if piece.is_king:
            crown = self.king_font.render("K", True, self.colors["king"])
            surface.blit(crown, crown.get_rect(center=(cx, cy)))

        self.piece_surfaces[key] = surface
        return surface
