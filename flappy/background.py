# flappy/background.py
# Fundo do jogo: céu com tema pela hora do dia + camada de nuvens com parallax.
# - theme_for_hour(hour) é uma função pura (hora -> nome do tema)
# - o tema é aplicado só aqui, na apresentação; a simulação não sabe dele
# - as nuvens são procedurais (não há imagens) e se movem para a esquerda em loop
#
# Uso:
#   bg = SkyBackground(screen_size=(480, 640))
#   no loop principal:
#       bg.set_theme(current_theme())
#       bg.update(dt)
#       bg.draw(screen)
#
import time
import random
import pygame

# cores: (topo do céu, base do céu, nuvens)
THEMES = {
    "dawn":  ((255, 170, 120), (255, 220, 180), (255, 235, 220)),
    "day":   ((110, 190, 240), (190, 230, 255), (255, 255, 255)),
    "dusk":  ((120, 80, 150), (250, 150, 100), (230, 200, 210)),
    "night": ((10, 15, 45), (40, 50, 90), (90, 95, 120)),
}

CLOUD_SPEED = 20.0   # px/s
STAR_COUNT = 40


def theme_for_hour(hour):
    """0..23 -> 'dawn' | 'day' | 'dusk' | 'night'."""
    if not 0 <= hour <= 23:
        raise ValueError(f"hora inválida: {hour}")
    if 6 <= hour < 9:
        return "dawn"
    if 9 <= hour < 18:
        return "day"
    if 18 <= hour < 21:
        return "dusk"
    return "night"


def current_theme(now=None):
    """Tema para o relógio local (ou para o timestamp `now`)."""
    t = time.localtime(now)
    return theme_for_hour(t.tm_hour)


class CloudLayer:
    """Nuvens procedurais que deslizam na horizontal e dão a volta na tela."""
    def __init__(self, screen_size, speed=CLOUD_SPEED, count=5, seed=7):
        self.screen_w, self.screen_h = screen_size
        self.speed = speed
        self.offset = 0.0
        # nuvens saem 60 px pela esquerda e reentram 60 px depois da borda direita
        self.span = self.screen_w + 120

        # posições fixas geradas uma vez; o offset é que anda
        rnd = random.Random(seed)
        self.clouds = []
        for _ in range(count):
            x = rnd.uniform(0, self.screen_w)
            y = rnd.uniform(20, self.screen_h * 0.45)
            w = rnd.randint(60, 120)
            self.clouds.append((x, y, w))

    def update(self, dt):
        self.offset = (self.offset + self.speed * dt) % self.span

    def positions(self):
        """(x, y, largura) de cada nuvem no frame atual."""
        return [((x - self.offset) % self.span - 60, y, w) for x, y, w in self.clouds]

    def draw(self, surface, color):
        for cx, y, w in self.positions():
            h = w // 3
            pygame.draw.ellipse(surface, color, (int(cx), int(y), w, h))
            pygame.draw.ellipse(surface, color, (int(cx + w * 0.25), int(y - h * 0.5), w // 2, h))


class SkyBackground:
    def __init__(self, screen_size=(480, 640), theme="day", cloud_speed=CLOUD_SPEED):
        self.screen_size = screen_size
        w, h = screen_size
        self.clouds = CloudLayer(screen_size, speed=cloud_speed)
        self.theme = None
        self._sky = None
        self.set_theme(theme)

        rnd = random.Random(11)
        self.stars = [(rnd.randrange(w), rnd.randrange(int(h * 0.6))) for _ in range(STAR_COUNT)]

    def set_theme(self, theme):
        if theme not in THEMES:
            raise ValueError(f"tema desconhecido: {theme}")
        if theme == self.theme:
            return
        self.theme = theme
        # o gradiente só é refeito quando o tema muda
        self._sky = self._make_gradient(*THEMES[theme][:2])

    def _make_gradient(self, top, bottom):
        w, h = self.screen_size
        surf = pygame.Surface((w, h))
        for y in range(h):
            k = y / max(1, h - 1)
            color = tuple(int(top[i] + (bottom[i] - top[i]) * k) for i in range(3))
            pygame.draw.line(surf, color, (0, y), (w, y))
        return surf

    def update(self, dt):
        self.clouds.update(dt)

    def draw(self, surface):
        surface.blit(self._sky, (0, 0))
        if self.theme == "night":
            for sx, sy in self.stars:
                surface.set_at((sx, sy), (240, 240, 200))
        self.clouds.draw(surface, THEMES[self.theme][2])
