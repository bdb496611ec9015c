"""Helpers for drawing backgrounds stretched to the screen."""

import pygame


def scaled_rect(texture_width, texture_height, screen_width, screen_height):
    """Destination (x, y, w, h) stretching a texture over the screen, or None if empty."""
    if texture_width <= 0 or texture_height <= 0:
        return None
    scale_x = screen_width / texture_width
    scale_y = screen_height / texture_height
    return (0, 0, int(texture_width * scale_x), int(texture_height * scale_y))


def scrolling_rects(texture_width, texture_height, screen_width, screen_height, scroll_speed, ticks):
    """Destination rects of a horizontally scrolling, repeated texture at the given tick."""
    if texture_width <= 0 or texture_height <= 0:
        return []
    scale_x = screen_width / texture_width
    scale_y = screen_height / texture_height
    offset = (ticks // scroll_speed) % texture_width
    num_tiles = screen_width // texture_width + 2
    width = int(texture_width * scale_x)
    height = int(texture_height * scale_y)
    return [
        (int((i * texture_width - offset) * scale_x), 0, width, height)
        for i in range(num_tiles)
    ]


def render_scale_texture(target, texture, screen_width, screen_height):
    """Draw the texture stretched over the whole screen."""
    if texture is None:
        return
    rect = scaled_rect(*texture.get_size(), screen_width, screen_height)
    if rect is None:
        return
    x, y, w, h = rect
    target.blit(pygame.transform.scale(texture, (w, h)), (x, y))


def render_scale_scrolling_texture(target, texture, screen_width, screen_height, scroll_speed):
    """Draw the texture stretched and scrolled according to the elapsed ticks."""
    if texture is None:
        return
    rects = scrolling_rects(
        *texture.get_size(), screen_width, screen_height, scroll_speed, pygame.time.get_ticks()
    )
    if not rects:
        return
    _, _, w, h = rects[0]
    scaled = pygame.transform.scale(texture, (w, h))
    for x, y, _, _ in rects:
        target.blit(scaled, (x, y))