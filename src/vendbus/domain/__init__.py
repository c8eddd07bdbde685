"""Domain layer: enums, events, rules, ports and entities."""
