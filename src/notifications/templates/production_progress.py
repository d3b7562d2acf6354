"""Production progress template: sent while an article is being made.

Renders a French and an Arabic message in one email. The wording switches to
the completion phrasing once progress reaches 100%.
"""

from html import escape

COMPLETE = 100


def _article_text(article_index) -> tuple[str, str]:
    if not article_index:
        return "", ""
    return f" (Article #{article_index})", f" (المقالة رقم {article_index})"


class ProductionProgressTemplate:
    notification_type = "ProductionProgress"
    signature_fr = "L’équipe Wahret Zmen"
    signature_ar = "فريق وهرة الزمن"

    @staticmethod
    def subject(short_order_id: str, progress: int, article_index=None) -> str:
        article_fr, _ = _article_text(article_index)
        if progress == COMPLETE:
            return f"Commande {short_order_id}{article_fr} – Votre création est prête !"
        return f"Commande {short_order_id}{article_fr} – Suivi de la confection artisanale ({progress}%)"

    @classmethod
    def render(cls, context: dict) -> dict:
        """Render subject, both plain-text bodies and the combined HTML body.

        Context keys: customer_name, short_order_id, product_title,
        color_label, progress, article_index (optional).
        """
        name = context.get("customer_name", "")
        order = context.get("short_order_id", "")
        title = context.get("product_title", "")
        color = context.get("color_label", "")
        progress = context.get("progress", 0)
        article_index = context.get("article_index")
        article_fr, article_ar = _article_text(article_index)
        complete = progress == COMPLETE

        fr_status = (
            "Bonne nouvelle ! Votre article est maintenant entièrement terminé et est prêt "
            "pour la livraison ou le retrait en boutique."
            if complete
            else "Nous vous tiendrons informé dès que l'article sera entièrement terminé et prêt."
        )
        ar_status = (
            "خبر سار! لقد اكتملت القطعة بالكامل، وهي جاهزة للتسليم أو الاستلام من المتجر."
            if complete
            else "سنقوم بإبلاغك فور الانتهاء الكامل من تفصيل القطعة وتجهيزها."
        )

        body_fr = (
            f"Cher {name},\n\n"
            "Nous avons le plaisir de vous informer que la création artisanale que notre atelier "
            f"est en train de confectionner pour vous – {title} (Couleur : {color}){article_fr}, "
            f"dans la commande n°{order} – est actuellement terminée à {progress}%.\n\n"
            f"{fr_status}\n\n"
            f"Merci pour votre confiance,\n{cls.signature_fr}"
        )
        body_ar = (
            f"عزيزي {name}،\n\n"
            f"يسرنا أن نبلغك أن القطعة الحرفية التي نقوم بتفصيلها لك في ورشتنا – {title} "
            f"(اللون: {color}){article_ar}، ضمن الطلب رقم {order} – "
            f"وصلت حاليًا إلى {progress}٪ من مرحلة الإنجاز.\n\n"
            f"{ar_status}\n\n"
            f"شكراً لثقتك بنا،\n{cls.signature_ar}"
        )

        raw = {"name": name, "order": order, "title": title, "color": color, "progress": progress}
        e = {key: escape(str(value)) for key, value in raw.items()}
        fr_status_html = (
            "<p><strong>Bonne nouvelle !</strong> Votre article est maintenant <strong>entièrement terminé</strong> "
            "et est <strong>prêt pour la livraison ou le retrait en boutique</strong>.</p>"
            if complete
            else "<p>Nous vous tiendrons informé dès que l'article sera entièrement terminé et prêt.</p>"
        )
        ar_status_html = (
            '<p dir="rtl"><strong>خبر سار!</strong> لقد اكتملت القطعة بالكامل، وهي '
            "<strong>جاهزة للتسليم أو الاستلام من المتجر</strong>.</p>"
            if complete
            else '<p dir="rtl">سنقوم بإبلاغك فور الانتهاء الكامل من تفصيل القطعة وتجهيزها.</p>'
        )
        html_body = (
            '<div style="font-family: Arial, sans-serif; line-height: 1.6;">'
            f"<p><strong>Cher {e['name']}</strong>,</p>"
            "<p>Nous avons le plaisir de vous informer que la création artisanale que notre atelier "
            f"est en train de confectionner pour vous – <strong>{e['title']}</strong> "
            f"(Couleur : <strong>{e['color']}</strong>){escape(article_fr)}, "
            f"dans la <strong>commande n°{e['order']}</strong> – "
            f"est actuellement <strong>terminée à {e['progress']}%</strong>.</p>"
            f"{fr_status_html}"
            f"<p>Merci pour votre confiance,<br/><strong>{cls.signature_fr}</strong></p>"
            '<hr style="margin: 2rem 0;" />'
            f'<p dir="rtl"><strong>عزيزي {e["name"]}</strong>،</p>'
            '<p dir="rtl">يسرنا أن نبلغك أن القطعة الحرفية التي نقوم بتفصيلها لك في ورشتنا – '
            f"<strong>{e['title']}</strong> (اللون: <strong>{e['color']}</strong>){escape(article_ar)}، "
            f"ضمن <strong>الطلب رقم {e['order']}</strong> – "
            f"وصلت حاليًا إلى <strong>{e['progress']}٪</strong> من مرحلة الإنجاز.</p>"
            f"{ar_status_html}"
            f'<p dir="rtl">شكراً لثقتك بنا،<br/><strong>{cls.signature_ar}</strong></p>'
            "</div>"
        )

        return {
            "subject": cls.subject(order, progress, article_index),
            "body_fr": body_fr,
            "body_ar": body_ar,
            "html_body": html_body,
        }
