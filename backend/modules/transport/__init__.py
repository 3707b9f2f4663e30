"""Transport module: shuttle routes, vehicles and departure schedules."""
