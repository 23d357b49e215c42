from food_roulette.infrastructure.persistence.json_file.storage import JsonFileStorage

__all__ = ["JsonFileStorage"]
