# NN/view.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict
import numpy as np
import pygame as pg

from interfaces import NetworkLike


@dataclass(frozen=True)
class HeatmapStyle:
    background: tuple[int, int, int] = (16, 16, 16)
    negative: tuple[int, int, int] = (220, 40, 40)
    zero: tuple[int, int, int] = (235, 235, 235)
    positive: tuple[int, int, int] = (40, 180, 90)
    column_px: int = 24     # width of one activation column
    gap_px: int = 48        # width of the weight block between two columns
    margin_px: int = 8


def diverging_rgb(values: np.ndarray, style: HeatmapStyle) -> np.ndarray:
    """
    Colour every value by sign and size relative to max |values|.
    Returns uint8 of shape values.shape + (3,).
    """
    v = np.asarray(values, dtype=np.float64)
    scale = float(np.abs(v).max()) if v.size else 0.0
    t = np.clip(v / scale, -1.0, 1.0) if scale > 0 else np.zeros_like(v)
    t = t[..., None]

    zero = np.asarray(style.zero, dtype=np.float64)
    neg = np.asarray(style.negative, dtype=np.float64)
    pos = np.asarray(style.positive, dtype=np.float64)
    rgb = np.where(t < 0, zero + (-t) * (neg - zero), zero + t * (pos - zero))
    return np.rint(rgb).astype(np.uint8)


class ActivationView:
    """
    Heatmap of a network: one column per layer showing the activation buffers,
    and between columns the weight matrix (rows = target neuron, columns =
    source neuron). Each block is scaled to its own max |value|.
    """

    def __init__(self, network: NetworkLike, height: int, style: HeatmapStyle | None = None):
        self.network = network
        self.style = style or HeatmapStyle()
        n_layers = len(network.layer_sizes)
        s = self.style
        width = 2 * s.margin_px + n_layers * s.column_px + (n_layers - 1) * s.gap_px
        self.surface = pg.Surface((width, height))
        self.redraw()

    # ---------- Geometry ----------
    def _inner_height(self) -> int:
        return self.surface.get_height() - 2 * self.style.margin_px

    def column_rect(self, layer: int) -> pg.Rect:
        s = self.style
        x = s.margin_px + layer * (s.column_px + s.gap_px)
        return pg.Rect(x, s.margin_px, s.column_px, self._inner_height())

    def weight_rect(self, index: int) -> pg.Rect:
        s = self.style
        x = s.margin_px + (index + 1) * s.column_px + index * s.gap_px
        return pg.Rect(x, s.margin_px, s.gap_px, self._inner_height())

    def cell_center(self, layer: int, neuron: int) -> tuple[int, int]:
        rect = self.column_rect(layer)
        n = self.network.layer_sizes[layer]
        return rect.centerx, int(rect.top + (neuron + 0.5) * rect.height / n)

    # ---------- Drawing ----------
    def _blit_grid(self, rgb: np.ndarray, rect: pg.Rect) -> None:
        # rgb is (rows, cols, 3); surfarray wants (width, height, 3)
        grid = pg.surfarray.make_surface(np.ascontiguousarray(rgb.transpose(1, 0, 2)))
        self.surface.blit(pg.transform.scale(grid, rect.size), rect)

    def redraw(self) -> None:
        """Paint weights and the activation buffers as they are now."""
        self.surface.fill(self.style.background)
        for index, matrix in enumerate(self.network.weights):
            self._blit_grid(diverging_rgb(matrix.data, self.style), self.weight_rect(index))
        for layer, values in enumerate(self.network.activation_values):
            self._blit_grid(diverging_rgb(values.data[:, None], self.style), self.column_rect(layer))

    def on_pass(self, stats: Dict[str, Any]) -> None:
        """Pass callback for NN.evaluate; the buffers already hold this pass."""
        self.redraw()

    def save(self, path: str) -> None:
        pg.image.save(self.surface, path)
