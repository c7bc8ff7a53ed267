# flappy/game.py
# Janela, loop principal e apresentação do jogo.
# - a simulação (física, canos, placar) mora em GameSession; aqui só
#   roteamos eventos, chamamos tick() e desenhamos
# - ESPAÇO / seta para cima / clique: pula (ou reinicia no game over)
# - M ou clique no botão do canto: liga/desliga o som
#
import pygame

from flappy.bird import Bird, BIRD_X, BIRD_RADIUS
from flappy.obstacle import ObstacleStream
from flappy.session import GameSession
from flappy.sounds import SoundBoard
from flappy.spawner import SPAWN_EVENT
from flappy.background import SkyBackground, current_theme

# ----------------- Configurações -----------------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 640
FPS = 60

FONT_NAME = "arial"
TEXT_COLOR = (0, 0, 0)
OVERLAY_COLOR = (255, 255, 255)

MUTE_BTN_SIZE = 36

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)


def mute_button_hit(pos, rect):
    return rect.collidepoint(pos)


# ----------------- Game class -----------------
class Game:
    def __init__(self, screen_size=(SCREEN_WIDTH, SCREEN_HEIGHT), rng=None):
        if BIRD_X + BIRD_RADIUS >= screen_size[0]:
            raise ValueError(f"largura {screen_size[0]} não comporta o pássaro em x={BIRD_X}")

        pygame.init()
        try:
            pygame.mixer.init()
        except Exception:
            print("Aviso: mixer de áudio não pôde ser inicializado, jogo segue sem som.")

        # janela e clock
        self.screen_size = screen_size
        w, h = screen_size
        self.screen = pygame.display.set_mode(screen_size)
        pygame.display.set_caption("Flappy")
        self.clock = pygame.time.Clock()
        self.running = True

        self.mute_button_rect = pygame.Rect(w - MUTE_BTN_SIZE - 10, 10, MUTE_BTN_SIZE, MUTE_BTN_SIZE)

        self.background = SkyBackground(screen_size=screen_size, theme=current_theme())
        self.sounds = SoundBoard()

        # fonts
        self.font = pygame.font.SysFont(FONT_NAME, 20)
        self.font_big = pygame.font.SysFont(FONT_NAME, 30)

        # sessão: pássaro + canos + placar
        self.session = GameSession(
            bird=Bird(playfield_height=h),
            obstacles=ObstacleStream(playfield_width=w, playfield_height=h, rng=rng),
            sounds=self.sounds,
        )
        self.session.start()

    # ----------------- main loop -----------------
    def run(self):
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0

            self.handle_events()
            if not self.running:
                break

            self.update(dt)
            self.draw()

        self.quit()

    # ----------------- events -----------------
    def handle_events(self):
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == SPAWN_EVENT:
            self.session.spawner.handle(event)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_m:
                self.session.toggle_mute()
            elif event.key in JUMP_KEYS:
                self.session.primary_action()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # clique no botão de mute é consumido e não vira pulo
            if mute_button_hit(event.pos, self.mute_button_rect):
                self.session.toggle_mute()
            else:
                self.session.primary_action()

    # ----------------- update -----------------
    def update(self, dt):
        # fundo anda sempre, mesmo no game over
        self.background.set_theme(current_theme())
        self.background.update(dt)
        self.session.tick()

    # ----------------- draw -----------------
    def draw(self):
        self.background.draw(self.screen)
        self.session.obstacles.draw(self.screen)
        self.session.bird.draw(self.screen)

        self._draw_hud()
        self._draw_mute_button()
        if self.session.game_over_visible():
            self._draw_game_over()

        pygame.display.flip()

    def _draw_hud(self):
        score_surf = self.font.render(f"Score: {self.session.score}", True, TEXT_COLOR)
        best_surf = self.font.render(f"Recorde: {self.session.high_score}", True, TEXT_COLOR)
        self.screen.blit(score_surf, (20, 14))
        self.screen.blit(best_surf, (20, 38))
        pygame.display.set_caption(f"Flappy | FPS: {int(self.clock.get_fps())}")

    def _draw_mute_button(self):
        rect = self.mute_button_rect
        pygame.draw.rect(self.screen, (0, 0, 0), rect, border_radius=8)
        pygame.draw.rect(self.screen, (220, 220, 220), rect, 2, border_radius=8)
        # alto-falante simples
        cx, cy = rect.center
        pygame.draw.rect(self.screen, (255, 255, 255), (cx - 9, cy - 4, 6, 8))
        pygame.draw.polygon(self.screen, (255, 255, 255),
                            [(cx - 3, cy - 4), (cx + 5, cy - 10), (cx + 5, cy + 10), (cx - 3, cy + 4)])
        if self.session.mute:
            pygame.draw.line(self.screen, (230, 60, 60),
                             (rect.x + 6, rect.y + 6), (rect.right - 6, rect.bottom - 6), 4)

    def _draw_game_over(self):
        w, h = self.screen_size
        panel = pygame.Surface((w - 60, 200), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 140))
        self.screen.blit(panel, panel.get_rect(center=(w // 2, h // 2 + 50)))

        lines = [
            (self.font_big, "GAME OVER"),
            (self.font_big, f"Score: {self.session.score}"),
            (self.font_big, f"Recorde: {self.session.high_score}"),
            (self.font, "Pressione ESPAÇO para reiniciar"),
        ]
        for i, (font, text) in enumerate(lines):
            surf = font.render(text, True, OVERLAY_COLOR)
            self.screen.blit(surf, surf.get_rect(center=(w // 2, h // 2 - 10 + i * 40)))

    # ----------------- quit -----------------
    def quit(self):
        self.session.spawner.cancel()
        pygame.quit()
