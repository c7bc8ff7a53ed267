# flappy/bird.py
# Pássaro controlado pelo jogador.
# - cai sob gravidade constante (por tick, não por segundo)
# - jump() substitui a velocidade atual pelo impulso (não soma)
# - tocar o chão ou o teto é fatal (sem quique)
#
# Ajuste os parâmetros de TUNING abaixo para calibrar a sensação do pulo.

import pygame

# ---------- PARÂMETROS DE TUNING ----------
BIRD_X = 150             # deslocamento horizontal fixo (px)
BIRD_RADIUS = 20         # raio do círculo desenhado (px)
GRAVITY = 0.25           # px/tick²
JUMP_IMPULSE = -5.0      # px/tick (negativo = sobe)
PLAYFIELD_HEIGHT = 640
BIRD_COLOR = (255, 220, 0)
# -----------------------------------------


class Bird(pygame.sprite.Sprite):
    """Entidade única controlada pelo jogador; dona de posição e velocidade."""

    def __init__(self, x=BIRD_X, radius=BIRD_RADIUS, playfield_height=PLAYFIELD_HEIGHT,
                 gravity=GRAVITY, jump_impulse=JUMP_IMPULSE):
        super().__init__()
        if radius <= 0:
            raise ValueError(f"radius deve ser positivo (recebido {radius})")
        if playfield_height <= 2 * radius:
            raise ValueError(f"playfield_height ({playfield_height}) não comporta o pássaro (raio {radius})")

        self.radius = radius
        self.playfield_height = playfield_height
        self.gravity = gravity
        self.jump_impulse = jump_impulse

        # posição inicial guardada para reset()
        self.start_pos = pygame.math.Vector2(x, playfield_height / 2)
        self.pos = pygame.math.Vector2(self.start_pos)
        self.velocity = 0.0

        self.image = self._make_image()
        self.rect = self.image.get_rect(center=(int(self.pos.x), int(self.pos.y)))

    def _make_image(self):
        size = self.radius * 2
        surf = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(surf, BIRD_COLOR, (self.radius, self.radius), self.radius)
        return surf

    def apply_gravity(self):
        """Um tick de física: acelera e depois move."""
        self.velocity += self.gravity
        self.pos.y += self.velocity
        self._sync_rect()

    def jump(self):
        self.velocity = self.jump_impulse

    def check_boundary(self):
        """True se o pássaro saiu pelo chão ou pelo teto."""
        return (self.pos.y + self.radius > self.playfield_height
                or self.pos.y - self.radius < 0)

    def reset(self):
        self.pos = pygame.math.Vector2(self.start_pos)
        self.velocity = 0.0
        self._sync_rect()

    def hitbox(self):
        """
        Caixa usada contra os canos: canto superior esquerdo na posição do
        pássaro e lado igual ao raio. Não é um teste de círculo exato.
        Retorna (left, top, right, bottom) em float.
        """
        return (self.pos.x, self.pos.y, self.pos.x + self.radius, self.pos.y + self.radius)

    def _sync_rect(self):
        self.rect.center = (int(self.pos.x), int(self.pos.y))

    def draw(self, surface):
        surface.blit(self.image, self.rect)
