# game/render.py
import pygame

from game.scene import Circle, Clear, FillRect, Line, Text


def draw_commands(screen, font, commands):
    for cmd in commands:
        if isinstance(cmd, Clear):
            screen.fill(cmd.color)
        elif isinstance(cmd, FillRect):
            r = cmd.rect
            pygame.draw.rect(screen, cmd.color, pygame.Rect(int(r.x), int(r.y), int(r.w), int(r.h)))
        elif isinstance(cmd, Line):
            pygame.draw.line(screen, cmd.color, _px(cmd.start), _px(cmd.end), cmd.width)
        elif isinstance(cmd, Circle):
            pygame.draw.circle(screen, cmd.color, _px(cmd.center), cmd.radius)
        elif isinstance(cmd, Text):
            screen.blit(font.render(cmd.text, True, cmd.color), _px(cmd.position))
        else:
            raise TypeError(f"unknown draw command: {cmd!r}")


def _px(p):
    return int(round(p[0])), int(round(p[1]))
