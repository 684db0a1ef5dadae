"""STAC extensions: projection, raster, electro-optical and authentication."""