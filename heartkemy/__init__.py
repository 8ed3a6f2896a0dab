"""HeartKemy: emotional journaling on a map, with letters delivered by simulated flight."""
