from io import BytesIO
from typing import Any

import matplotlib.figure
from matplotlib.backends.backend_agg import FigureCanvasAgg

INCOME_COLOR = "#10b981"
EXPENSE_COLOR = "#ef4444"
PIE_COLORS = ["#0a1827", "#c5a059", "#10b981", "#3b82f6", "#f59e0b", "#8b5cf6", "#ef4444"]


class MatplotlibRenderer:
    def render_chart(
        self, spec: dict[str, Any], width: int = 800, height: int = 400, dpi: int = 100
    ) -> bytes:
        """
        Renders a dashboard chart to PNG. Charts are drawn per request, not cached.
        Spec Schema:
        {
            "type": "grouped_bar" | "pie",
            "title": str,
            "data": {
                "labels": list[str],
                "series": {name: list[float]}   # grouped_bar
                "values": list[float]           # pie
            }
        }
        """
        fig = matplotlib.figure.Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        FigureCanvasAgg(fig)
        ax = fig.add_subplot(111)

        data = spec.get("data", {})
        labels = data.get("labels", [])

        if spec.get("type") == "pie":
            values = data.get("values", [])
            if values and sum(values) > 0:
                ax.pie(
                    values,
                    labels=labels,
                    colors=[PIE_COLORS[i % len(PIE_COLORS)] for i in range(len(values))],
                    autopct="%1.0f%%",
                    wedgeprops={"width": 0.45},
                )
                ax.set_aspect("equal")
            else:
                ax.text(0.5, 0.5, "Sem dados", ha="center", va="center")
                ax.set_axis_off()
        else:
            series = data.get("series", {})
            count = max(len(series), 1)
            bar_w = 0.8 / count
            colors = [INCOME_COLOR, EXPENSE_COLOR]
            for i, (name, values) in enumerate(series.items()):
                xs = [x + (i - (count - 1) / 2) * bar_w for x in range(len(labels))]
                ax.bar(xs, values, width=bar_w, label=name, color=colors[i % len(colors)])
            ax.set_xticks(range(len(labels)))
            ax.set_xticklabels(labels)
            if series:
                ax.legend()
            ax.spines["top"].set_visible(False)
            ax.spines["right"].set_visible(False)

        if title := spec.get("title"):
            ax.set_title(title)

        fig.tight_layout()

        buf = BytesIO()
        fig.savefig(buf, format="png")
        png_data = buf.getvalue()
        buf.close()
        return png_data


def monthly_chart_spec(monthly: list[Any]) -> dict[str, Any]:
    return {
        "type": "grouped_bar",
        "title": "Receitas x Despesas",
        "data": {
            "labels": [p.name for p in monthly],
            "series": {
                "Receitas": [p.income for p in monthly],
                "Despesas": [p.expense for p in monthly],
            },
        },
    }


def category_chart_spec(income_by_category: dict[str, float]) -> dict[str, Any]:
    return {
        "type": "pie",
        "title": "Entradas por Categoria",
        "data": {
            "labels": list(income_by_category.keys()),
            "values": list(income_by_category.values()),
        },
    }
