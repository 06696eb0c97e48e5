"""Starter document exercising every block kind"""

SAMPLE_DOCUMENT = """\
:::text [heading="Welcome"]
Welcome to this destination! Text blocks hold free-form descriptions.

You can use **bold** and *italic* text in your content.
:::

:::timeline [title="Day 1: Journey"]
Dhaka to Sylhet
- Train: 395 Taka
- Duration: 7 hours
[tips]
- Book tickets 2-3 days in advance
[/tips]
[notes]
- Departure times change seasonally
[/notes]

Sylhet Station to Shahjalal Mazar
- CNG auto: 25 Taka per person
:::

:::tips
- Carry enough cash, many places do not accept cards
- Download offline maps before the journey
:::

:::notes
- Entry times may vary by season
- Some locations require advance booking
:::

:::table [title="Budget" caption="Approximate costs"]
Category | Cost (BDT) | Notes
---
Accommodation | 1500 | Per night
Food | 800 | Per day
Transport | 500 | Local travel
:::

:::image
url: https://example.com/your-image.jpg
caption: Describe your image
alt: Alternative text for accessibility
:::

:::gallery [title="Photo Highlights"]
url: https://example.com/image1.jpg
caption: First photo
---
url: https://example.com/image2.jpg
caption: Second photo
:::"""
