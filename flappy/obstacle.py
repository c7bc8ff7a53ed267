# flappy/obstacle.py
# Canos (obstáculos) com uma abertura vertical ("gap") por onde o pássaro passa.
# - ObstacleStream guarda os canos em ordem de spawn (x decrescente da direita p/ esquerda)
# - todos andam para a esquerda na mesma velocidade (game_speed)
# - canos que saíram totalmente da tela são descartados
#
# Colisão e pontuação usam a caixa do pássaro (Bird.hitbox), não um círculo.

import random
import pygame

PLAYFIELD_WIDTH = 480
PLAYFIELD_HEIGHT = 640

PIPE_WIDTH = 60
PIPE_GAP = 150           # altura fixa da abertura
UPPER_MARGIN = 80        # distância mínima do topo da tela até a abertura
LOWER_MARGIN = 80        # distância mínima do fim da abertura até o chão
GAME_SPEED = 2           # px/tick

PIPE_COLOR = (40, 170, 60)
PIPE_EDGE_COLOR = (20, 110, 35)


class Obstacle:
    """Um par de canos; gap_offset é relativo ao centro da tela."""
    def __init__(self, x, gap_offset, playfield_height=PLAYFIELD_HEIGHT,
                 width=PIPE_WIDTH, gap_height=PIPE_GAP):
        self.x = float(x)
        self.gap_offset = float(gap_offset)
        self.playfield_height = playfield_height
        self.width = width
        self.gap_height = gap_height
        self.scored = False

    @property
    def gap_top(self):
        return self.playfield_height / 2 + self.gap_offset

    @property
    def gap_bottom(self):
        return self.gap_top + self.gap_height

    @property
    def right(self):
        return self.x + self.width

    def is_offscreen(self):
        return self.right < 0

    def collides(self, bird):
        left, top, right, bottom = bird.hitbox()
        overlaps_x = left < self.x + self.width and right > self.x
        return overlaps_x and (top < self.gap_top or bottom > self.gap_bottom)

    def passed(self, bird):
        # borda traseira do cano já passou da frente do pássaro
        return self.right < bird.pos.x

    def draw(self, surface):
        x, w = int(self.x), self.width
        top_h = int(self.gap_top)
        bottom_y = int(self.gap_bottom)
        top_rect = pygame.Rect(x, 0, w, top_h)
        bottom_rect = pygame.Rect(x, bottom_y, w, self.playfield_height - bottom_y)
        for rect in (top_rect, bottom_rect):
            pygame.draw.rect(surface, PIPE_COLOR, rect)
            pygame.draw.rect(surface, PIPE_EDGE_COLOR, rect, 2)


class ObstacleStream:
    """Coleção ordenada de canos em voo: spawn, avanço, colisão e pontuação."""

    def __init__(self, playfield_width=PLAYFIELD_WIDTH, playfield_height=PLAYFIELD_HEIGHT,
                 pipe_width=PIPE_WIDTH, gap_height=PIPE_GAP, upper_margin=UPPER_MARGIN,
                 lower_margin=LOWER_MARGIN, game_speed=GAME_SPEED, rng=None):
        if playfield_width <= 0 or playfield_height <= 0:
            raise ValueError("dimensões da tela devem ser positivas")
        if pipe_width <= 0 or gap_height <= 0:
            raise ValueError("pipe_width e gap_height devem ser positivos")
        if upper_margin < 0 or lower_margin < 0:
            raise ValueError("margens não podem ser negativas")
        if upper_margin + gap_height + lower_margin > playfield_height:
            raise ValueError(
                f"abertura ({gap_height}) + margens ({upper_margin}+{lower_margin}) "
                f"não cabem na altura {playfield_height}")

        self.playfield_width = playfield_width
        self.playfield_height = playfield_height
        self.pipe_width = pipe_width
        self.gap_height = gap_height
        self.upper_margin = upper_margin
        self.lower_margin = lower_margin
        self.game_speed = game_speed
        self.rng = rng if rng is not None else random

        self.obstacles = []

    def __len__(self):
        return len(self.obstacles)

    def __iter__(self):
        return iter(self.obstacles)

    def spawn(self, gap_offset=None):
        """Adiciona um cano na borda direita. Sem gap_offset, sorteia um que respeite as margens."""
        if gap_offset is None:
            gap_top = self.rng.uniform(self.upper_margin,
                                       self.playfield_height - self.lower_margin - self.gap_height)
            gap_offset = gap_top - self.playfield_height / 2
        obstacle = Obstacle(self.playfield_width, gap_offset,
                            playfield_height=self.playfield_height,
                            width=self.pipe_width, gap_height=self.gap_height)
        self.obstacles.append(obstacle)
        return obstacle

    def advance(self):
        for obstacle in self.obstacles:
            obstacle.x -= self.game_speed
        # remove canos fora da tela (sem efeito no jogo)
        self.obstacles = [o for o in self.obstacles if not o.is_offscreen()]

    def check_collision(self, bird):
        return any(o.collides(bird) for o in self.obstacles)

    def check_scoring(self, bird):
        """Marca os canos recém-ultrapassados; retorna quantos pontuaram agora."""
        newly = 0
        for obstacle in self.obstacles:
            if not obstacle.scored and obstacle.passed(bird):
                obstacle.scored = True
                newly += 1
        return newly

    def clear(self):
        self.obstacles = []

    def draw(self, surface):
        for obstacle in self.obstacles:
            obstacle.draw(surface)
