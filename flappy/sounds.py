# flappy/sounds.py
# Efeitos sonoros do jogo (pulo, ponto, game over).
# Os arquivos são opcionais: se faltarem, ou se o mixer não inicializou,
# play() simplesmente não toca nada.
#
# Arquivos procurados:
#  assets/sounds/jump.wav
#  assets/sounds/score.wav
#  assets/sounds/game_over.wav

import os
import pygame

ASSETS_DIR = os.path.join(os.path.dirname(__file__), "..", "assets")
SOUNDS_DIR = os.path.join(ASSETS_DIR, "sounds")

SOUND_FILES = {
    "jump": "jump.wav",
    "score": "score.wav",
    "game_over": "game_over.wav",
}
SFX_VOLUME = 0.8


class SoundBoard:
    def __init__(self, sounds_dir=SOUNDS_DIR, volume=SFX_VOLUME):
        self.sounds = {}

        if not pygame.mixer.get_init():
            return

        for sound_id, filename in SOUND_FILES.items():
            path = os.path.join(sounds_dir, filename)
            if not os.path.isfile(path):
                continue
            try:
                sound = pygame.mixer.Sound(path)
                sound.set_volume(volume)
                self.sounds[sound_id] = sound
            except Exception as e:
                print(f"Aviso: falha ao carregar {path}: {e}")

    def play(self, sound_id):
        if sound_id not in SOUND_FILES:
            raise KeyError(f"som desconhecido: {sound_id}")
        sound = self.sounds.get(sound_id)
        if sound is None:
            return
        try:
            sound.play()
        except Exception as e:
            print(f"Aviso: falha ao tocar '{sound_id}': {e}")
