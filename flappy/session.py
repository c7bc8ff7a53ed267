# flappy/session.py
# Estado de uma sessão de jogo: pássaro, canos, placar, recorde, fase e mute.
# Máquina de dois estados:
#   RUNNING  --(colisão com chão/teto/cano)-->  GAME_OVER
#   GAME_OVER --(restart explícito)-->          RUNNING
#
# Ordem de um tick: gravidade -> limites -> avanço dos canos -> colisão -> pontuação.
# Se houver colisão no tick, a pontuação daquele tick não é avaliada.

import pygame

from flappy.bird import Bird
from flappy.obstacle import ObstacleStream
from flappy.spawner import SpawnScheduler, SPAWN_INTERVAL_MS

RUNNING = "running"
GAME_OVER = "game_over"

# o overlay de game over aparece um pouco depois da colisão
GAME_OVER_OVERLAY_DELAY_MS = 100


class GameSession:
    def __init__(self, bird=None, obstacles=None, sounds=None,
                 spawn_interval_ms=SPAWN_INTERVAL_MS, set_timer=None, now=None):
        self.bird = bird if bird is not None else Bird()
        self.obstacles = obstacles if obstacles is not None else ObstacleStream()
        self.sounds = sounds
        self._now = now or pygame.time.get_ticks

        self.spawner = SpawnScheduler(self.obstacles.spawn, interval_ms=spawn_interval_ms,
                                      is_running=lambda: self.running,
                                      set_timer=set_timer)

        self.phase = RUNNING
        self.score = 0
        self.high_score = 0
        self.mute = False
        self.game_over_at = None
        self.ticks = 0

    @property
    def running(self):
        return self.phase == RUNNING

    def start(self):
        """Arma o spawner da primeira rodada."""
        self.spawner.start()

    # ----------------- simulação -----------------
    def tick(self):
        if self.phase != RUNNING:
            return
        self.ticks += 1

        self.bird.apply_gravity()
        if self.bird.check_boundary():
            self.game_over()
            return

        self.obstacles.advance()
        if self.obstacles.check_collision(self.bird):
            self.game_over()
            return

        for _ in range(self.obstacles.check_scoring(self.bird)):
            self.add_point()

    def add_point(self):
        self.score += 1
        if self.score > self.high_score:
            self.high_score = self.score
        self._play("score")

    # ----------------- transições -----------------
    def game_over(self):
        if self.phase != RUNNING:
            return
        self.phase = GAME_OVER
        self.spawner.cancel()
        self.high_score = max(self.high_score, self.score)
        self.game_over_at = self._now()
        self._play("game_over")
        print(f"Game over! Score: {self.score} | Recorde: {self.high_score}")

    def restart(self):
        """Só vale em GAME_OVER. Retorna True se a rodada foi reiniciada."""
        if self.phase != GAME_OVER:
            return False
        # ordem importa: cancela -> limpa -> reseta -> rearma
        self.spawner.cancel()
        self.obstacles.clear()
        self.bird.reset()
        self.score = 0
        self.game_over_at = None
        self.phase = RUNNING
        self.spawner.start()
        print(f"Nova rodada! Recorde atual: {self.high_score}")
        return True

    def game_over_visible(self):
        if self.phase != GAME_OVER or self.game_over_at is None:
            return False
        return self._now() - self.game_over_at >= GAME_OVER_OVERLAY_DELAY_MS

    # ----------------- entrada -----------------
    def primary_action(self):
        """Mesmo gatilho para pular (RUNNING) e reiniciar (GAME_OVER)."""
        if self.phase == RUNNING:
            self.bird.jump()
            self._play("jump")
        else:
            self.restart()

    def toggle_mute(self):
        self.mute = not self.mute
        return self.mute

    def _play(self, sound_id):
        if self.mute or self.sounds is None:
            return
        self.sounds.play(sound_id)
