"""
Account-level resource rendering: shipping settings, account status, account tax.
"""

from shopping.render.fields import field, render_fields

SERVICE_FIELDS = [
    field("Active", "active", present=lambda v: v is not None),
    field("Country", "deliveryCountry"),
    field("Currency", "currency"),
    field(
        "Delivery time",
        "deliveryTime",
        fmt=lambda t: f"{t.get('minTransitTimeInDays', 0)} - {t.get('maxTransitTimeInDays', 0)} days",
    ),
    field(
        "Handling time",
        "deliveryTime",
        present=lambda t: bool(t and t.get("maxHandlingTimeInDays")),
        fmt=lambda t: f"{t.get('minHandlingTimeInDays', 0)} - {t.get('maxHandlingTimeInDays', 0)} days",
    ),
    field("Rate groups", lambda service: len(service.get("rateGroups") or [])),
]

ACCOUNT_ISSUE_FIELDS = [
    field("Country", "country"),
    field("Destination", "destination"),
    field("Detail", "detail"),
    field("Documentation", "documentation"),
]

PRODUCT_STATISTICS_FIELDS = [
    field("Active", "statistics.active"),
    field("Pending", "statistics.pending"),
    field("Disapproved", "statistics.disapproved"),
    field("Expiring", "statistics.expiring"),
]

TAX_RULE_FIELDS = [
    field("Uses shipping tax", "shippingTaxed", fmt=lambda v: "yes"),
    field("Uses global rates", "useGlobalRate", fmt=lambda v: "yes"),
    field("Rate", "ratePercent", fmt=lambda v: f"{v}%"),
]


def render_shipping_settings(settings: dict) -> str:
    lines = [f"Shipping information for account {settings.get('accountId')}:"]

    services = settings.get("services") or []
    if not services:
        lines.append("- No shipping services found.")
    else:
        lines.append(f"- {len(services)} shipping service(s):")
        for service in services:
            lines.append(f"  Service \"{service.get('name')}\":")
            lines.extend(render_fields(service, SERVICE_FIELDS, indent="  "))

    postal_groups = settings.get("postalCodeGroups") or []
    if postal_groups:
        lines.append(f"- {len(postal_groups)} postal code group(s).")

    return "\n".join(lines)


def render_account_status(status: dict) -> str:
    lines = [f"Account {status.get('accountId')}:"]
    if status.get("websiteClaimed"):
        lines.append("- Website claimed")

    for product in status.get("products") or []:
        lines.append(
            f"- Products for {product.get('destination', 'unknown')} "
            f"in {product.get('country', 'all countries')} ({product.get('channel', 'online')}):"
        )
        stats = render_fields(product, PRODUCT_STATISTICS_FIELDS, indent="  ")
        lines.extend(stats or ["  - No products."])

        item_issues = product.get("itemLevelIssues") or []
        if item_issues:
            lines.append(f"  - {len(item_issues)} item level issue(s):")
            for issue in item_issues:
                lines.append(
                    f"    - [{issue.get('servability', 'unknown')}] {issue.get('code')}: "
                    f"{issue.get('description', '')} ({issue.get('numItems', 0)} items)"
                )

    issues = status.get("accountLevelIssues") or []
    if issues:
        lines.append(f"- {len(issues)} account level issue(s):")
        for issue in issues:
            lines.append(f"  - [{issue.get('severity', 'unknown')}] {issue.get('title')}")
            lines.extend(render_fields(issue, ACCOUNT_ISSUE_FIELDS, indent="    "))
    else:
        lines.append("- No account level issues.")

    return "\n".join(lines)


def render_account_tax(tax: dict) -> str:
    lines = [f"Account {tax.get('accountId')}:"]

    rules = tax.get("rules") or []
    if not rules:
        lines.append("- No tax settings, so no tax is charged.")
    else:
        lines.append(f"- {len(rules)} tax rule(s):")
        for rule in rules:
            lines.append(f"  For {rule.get('locationId')} in {rule.get('country')}:")
            lines.extend(render_fields(rule, TAX_RULE_FIELDS, indent="  "))

    return "\n".join(lines)
