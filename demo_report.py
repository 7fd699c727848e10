#!/usr/bin/env python
"""
Demonstration of the Rapport report builder

This script builds an invoice and a set of course certificates and writes
the generated HTML documents to the temp directory. Open them in a browser
and print them to check the page layout.
"""

import os
import sys
import tempfile

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import rapport


OUTPUT_DIR = tempfile.gettempdir()

INVOICE_PAGE = """
<h1>Invoice {{ number }}</h1>
<p>{{ customer.name }}<br>{{ customer.address }}</p>
<table>
  <thead><tr><th>Item</th><th>Qty</th><th>Price</th></tr></thead>
  <tbody>
  {% for item in items %}
    <tr><td>{{ item.name }}</td><td>{{ item.quantity }}</td><td>{{ item.price|floatformat:2 }}</td></tr>
  {% endfor %}
  </tbody>
</table>
<p><strong>Total: {{ total|floatformat:2 }}</strong></p>
"""

CERTIFICATE_PAGE = """
<div class="certificate">
  <h1>Certificate of Completion</h1>
  <p>This certifies that <strong>{{ name }}</strong> completed {{ course }}.</p>
</div>
"""

REPORT_TEMPLATE = """
<style>
  .certificate { text-align: center; padding-top: 40mm; }
  table { width: 100%; border-collapse: collapse; }
  th, td { border-bottom: 1px solid #ccc; text-align: left; }
</style>
"""


def demo_invoice():
    """Demonstrate a single page invoice"""
    print("\n=== Demo 1: Invoice ===")

    items = [
        {'name': 'Item A', 'quantity': 10, 'price': 99.99},
        {'name': 'Item B', 'quantity': 5, 'price': 149.99},
        {'name': 'Item C', 'quantity': 3, 'price': 299.99},
    ]
    fields = {
        'number': '2026-0042',
        'customer': {'name': 'ACME Corporation', 'address': '1 Main Street'},
        'items': items,
        'total': sum(item['quantity'] * item['price'] for item in items),
    }

    report = rapport.new(REPORT_TEMPLATE)
    report = rapport.set_title(report, 'Invoice 2026-0042')
    report = rapport.set_paper_size(report, 'letter')
    report = rapport.set_padding(report, 20)
    report = rapport.add_page(report, INVOICE_PAGE, fields)

    html = rapport.generate_html(report)
    path = rapport.save_to_file(html, os.path.join(OUTPUT_DIR, 'rapport_invoice.html'))

    print(f"✓ Generated invoice: {len(html)} characters")
    print(f"✓ Saved to: {path}")


def demo_certificates():
    """Demonstrate one landscape page per attendee"""
    print("\n=== Demo 2: Certificates ===")

    attendees = [
        {'name': 'Ada Lovelace', 'course': 'Analytical Engines'},
        {'name': 'Grace Hopper', 'course': 'Compilers'},
        {'name': 'Alan Turing', 'course': 'Computability'},
    ]

    report = rapport.new(REPORT_TEMPLATE)
    report = rapport.set_title(report, 'Certificates')
    report = rapport.set_paper_size(report, rapport.PaperSize.A4)
    report = rapport.set_rotation(report, rapport.Rotation.LANDSCAPE)
    report = rapport.add_pages(report, CERTIFICATE_PAGE, attendees)

    html = rapport.generate_html(report)
    path = rapport.save_to_file(html, os.path.join(OUTPUT_DIR, 'rapport_certificates.html'))

    print(f"✓ Generated {report.page_count} certificates: {len(html)} characters")
    print(f"✓ Saved to: {path}")


def demo_error_handling():
    """Demonstrate error handling"""
    print("\n=== Demo 3: Error Handling ===")

    report = rapport.new()

    try:
        rapport.set_paper_size(report, 'B5')
    except rapport.InvalidArgument as e:
        print(f"✓ Caught expected error: {type(e).__name__}: {e}")

    report = rapport.add_page(report, '<p>{{ missing }}</p>', {})
    try:
        rapport.generate_html(report)
    except rapport.TemplateError as e:
        print(f"✓ Caught expected error: {type(e).__name__}: {e}")


def main():
    """Run all demonstrations"""
    print("=" * 70)
    print("Rapport - Demonstration")
    print("=" * 70)

    try:
        demo_invoice()
        demo_certificates()
        demo_error_handling()

        print("\n" + "=" * 70)
        print("✓ Demonstrations completed!")
        print("=" * 70)

    except Exception as e:
        print(f"\n✗ Error during demonstration: {e}")
        import traceback
        traceback.print_exc()
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
