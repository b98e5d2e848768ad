"""Core building blocks: vectors, points, colours, polygons, engine and game objects."""