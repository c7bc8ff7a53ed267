# Ponto de entrada do jogo
# A lógica fica em flappy/ (simulação em session.py, janela em game.py).

from flappy.game import Game

if __name__ == "__main__":
    game = Game()
    game.run()
