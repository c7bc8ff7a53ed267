# flappy: pássaro, canos, placar e a janela pygame que os desenha.
