from .rasterizer import PillowSurface, export_png, rasterize
