"""Default HTML report template."""

REPORT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Healthcare Analytics - {{ generated_at }}</title>
    <style>
        :root {
            --primary: #2563eb; --success: #16a34a; --danger: #dc2626;
            --gray-100: #f3f4f6; --gray-200: #e5e7eb; --gray-700: #374151; --gray-900: #111827;
        }
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            line-height: 1.6; color: var(--gray-900); max-width: 1200px; margin: 0 auto; padding: 2rem; background: var(--gray-100); }
        .header { background: white; padding: 2rem; border-radius: 8px; margin-bottom: 2rem; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }
        h1 { color: var(--primary); margin: 0 0 0.5rem 0; }
        .meta { color: var(--gray-700); font-size: 0.9rem; }
        .stats { display: flex; gap: 2rem; margin-top: 1rem; }
        .stat { background: var(--gray-100); padding: 0.5rem 1rem; border-radius: 4px; }
        .stat-value { font-size: 1.5rem; font-weight: bold; color: var(--primary); }
        .stat-label { font-size: 0.75rem; color: var(--gray-700); text-transform: capitalize; }
        .report { background: white; padding: 1.5rem; border-radius: 8px; margin-bottom: 1.5rem; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }
        .report h2 { margin: 0 0 1rem 0; display: flex; align-items: center; gap: 0.5rem; }
        .badge { display: inline-block; padding: 0.25rem 0.75rem; border-radius: 9999px; font-size: 0.75rem; font-weight: 600; text-transform: uppercase; }
        .badge-matched { background: #dcfce7; color: #166534; }
        .badge-mismatch { background: #fee2e2; color: #991b1b; }
        .rows-table { width: 100%; border-collapse: collapse; font-size: 0.85rem; }
        .rows-table th { background: var(--gray-200); padding: 0.5rem; text-align: left; border-bottom: 1px solid var(--gray-700); }
        .rows-table td { padding: 0.5rem; border-bottom: 1px solid var(--gray-200); }
        .error { color: var(--danger); padding: 0.5rem; background: #fef2f2; border-radius: 4px; border-left: 4px solid var(--danger); }
        .empty { color: var(--gray-700); font-style: italic; }
    </style>
</head>
<body>
    <div class="header">
        <h1>Healthcare Analytics</h1>
        <p class="meta">Source: {{ source_path }} &middot; Generated: {{ generated_at }} &middot; {{ processing_time }}</p>
        <div class="stats">
            {% for table, count in stats.items() %}
            <div class="stat"><div class="stat-value">{{ count }}</div><div class="stat-label">{{ table }}</div></div>
            {% endfor %}
        </div>
    </div>
    {% for report in reports %}
    <div class="report" id="{{ report.name }}">
        <h2>{{ report.title }}
            {% if report.verified %}
                {% if report.matched %}<span class="badge badge-matched">SQL verified</span>
                {% else %}<span class="badge badge-mismatch">SQL mismatch</span>{% endif %}
            {% endif %}
        </h2>
        {% if report.error %}
        <div class="error">{{ report.error }}</div>
        {% elif report.rows %}
        <table class="rows-table">
            <thead><tr>{% for col in report.columns %}<th>{{ col }}</th>{% endfor %}</tr></thead>
            <tbody>
            {% for row in report.rows %}
                <tr>{% for col in report.columns %}<td>{{ row[col] }}</td>{% endfor %}</tr>
            {% endfor %}
            </tbody>
        </table>
        {% else %}
        <p class="empty">No rows</p>
        {% endif %}
    </div>
    {% endfor %}
</body>
</html>"""
