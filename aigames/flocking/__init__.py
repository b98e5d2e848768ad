"""Boids flocking simulation driven by weighted steering rules."""