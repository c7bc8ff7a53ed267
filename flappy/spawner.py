# flappy/spawner.py
# Agendador de spawn dos canos.
# - usa pygame.time.set_timer: o intervalo é de relógio (ms), não de ticks,
#   então o espaçamento entre canos não depende do FPS
# - cada ativação recebe um número de geração que vai dentro do evento;
#   eventos de uma ativação antiga que ainda estejam na fila são ignorados
# - no máximo um timer ativo por vez (start() sempre cancela antes)

import pygame

SPAWN_EVENT = pygame.USEREVENT + 1
SPAWN_INTERVAL_MS = 2000


class SpawnScheduler:
    def __init__(self, on_spawn, interval_ms=SPAWN_INTERVAL_MS, is_running=None, set_timer=None):
        """
        on_spawn: callback sem argumentos chamado a cada disparo válido
        is_running: callback -> bool; disparos com o jogo fora de Running viram no-op
        set_timer: substituto de pygame.time.set_timer (útil em testes)
        """
        if interval_ms <= 0:
            raise ValueError(f"interval_ms deve ser positivo (recebido {interval_ms})")
        self.on_spawn = on_spawn
        self.interval_ms = interval_ms
        self.is_running = is_running
        self._set_timer = set_timer

        self.armed = False
        self.generation = 0
        self.timer_active = False

    def _timer(self, event, millis):
        set_timer = self._set_timer or pygame.time.set_timer
        set_timer(event, millis)

    def start(self):
        """Arma uma nova ativação: spawn imediato e depois a cada interval_ms."""
        self.cancel()
        self.generation += 1
        self.armed = True
        self._fire()
        self._timer(pygame.event.Event(SPAWN_EVENT, generation=self.generation), self.interval_ms)
        self.timer_active = True

    def cancel(self):
        # desarma primeiro: mesmo que um evento já esteja na fila, ele será rejeitado
        self.armed = False
        if self.timer_active:
            self._timer(SPAWN_EVENT, 0)
            self.timer_active = False

    def handle(self, event):
        """Trata um evento da fila. Retorna True se houve spawn."""
        if event.type != SPAWN_EVENT:
            return False
        if getattr(event, "generation", None) != self.generation:
            return False
        return self._fire()

    def _fire(self):
        if not self.armed:
            return False
        if self.is_running is not None and not self.is_running():
            return False
        self.on_spawn()
        return True
