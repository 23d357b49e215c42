"""Prompts for dish suggestions."""

SUGGESTION_COUNT = 6

FOOD_SUGGESTION_SYSTEM_PROMPT = (
    "你是一位熟悉各地飲食的美食顧問。"
    "使用者正在用轉盤決定要吃什麼，請依照主題推薦具體、常見、買得到的食物品項。"
    "只回傳食物名稱，每個名稱簡短（不超過 8 個字），不要重複，不要附加描述。"
)


def build_suggestion_prompt(theme: str, count: int = SUGGESTION_COUNT) -> str:
    """User message asking for ``count`` dishes matching ``theme``."""
    return f"請根據主題「{theme}」推薦 {count} 個適合當晚餐的食物品項。請直接返回食物名稱列表，不要有額外描述。"
