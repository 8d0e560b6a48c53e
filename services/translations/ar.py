# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "خطأ",
    "dialog.warning": "تحذير",
    "dialog.success": "نجاح",

    # Buttons
    "button.next": "التالي",
    "button.previous": "السابق",
    "button.submit": "إرسال البلاغ",
    "button.retry": "إعادة المحاولة",
    "button.login": "تسجيل الدخول",

    # Wizard steps
    "wizard.report.title": "الإبلاغ عن أضرار كارثة",
    "wizard.step.disaster_info": "معلومات الكارثة",
    "wizard.step.location_impact": "الموقع والأضرار",
    "wizard.step.assistance_contact": "المساعدة والتواصل",
    "wizard.step.review": "المراجعة والإرسال",
    "wizard.progress": "الخطوة {current} من {total}",

    # Generic validation messages
    "validation.field_required": "الحقل '{field}' مطلوب",
    "validation.min_length": "يجب أن يحتوي الحقل '{field}' على {min} أحرف على الأقل",
    "validation.check_data": "يرجى التحقق من البيانات المدخلة",

    # Report validation - Step 1
    "validation.report.disaster_category": "يرجى اختيار فئة الكارثة",
    "validation.report.disaster_detail": "يرجى تحديد نوع الكارثة",
    "validation.report.custom_disaster_detail": "يرجى كتابة نوع الكارثة",
    "validation.report.description": "يرجى كتابة وصف",
    "validation.report.description_min_length": "يجب أن يتكون الوصف من {min} حرفاً على الأقل",
    "validation.report.severity": "يرجى اختيار درجة الخطورة",
    "validation.report.date_time": "يرجى تحديد وقت وقوع الكارثة",

    # Report validation - Step 2
    "validation.report.location": "يرجى اختيار الموقع على الخريطة",
    "validation.report.impact_type": "يرجى اختيار نوع واحد من الأضرار على الأقل",
    "validation.report.custom_impact_type": "يرجى كتابة نوع الضرر",
    "validation.report.impact_description": "يرجى كتابة وصف تفصيلي للأضرار",
    "validation.report.impact_description_min_length": "يجب أن يتكون وصف الأضرار من {min} حرفاً على الأقل",

    # Report validation - Step 3
    "validation.report.assistance_needed": "يرجى اختيار نوع واحد من المساعدة على الأقل",
    "validation.report.custom_assistance_type": "يرجى كتابة نوع المساعدة",
    "validation.report.assistance_description": "يرجى وصف المساعدة المطلوبة",
    "validation.report.urgency_level": "يرجى اختيار درجة الاستعجال",
    "validation.report.contact_name": "اسم جهة الاتصال مطلوب",
    "validation.report.contact": "يرجى إدخال رقم الهاتف أو البريد الإلكتروني",

    # Attachments
    "attachment.rejected.unsupported_type": "{name}: نوع الملف '{mime}' غير مقبول",
    "attachment.rejected.too_large": "{name}: حجم الملف يتجاوز {max_mb} ميغابايت",
    "attachment.rejected.limit_reached": "{name}: الحد الأقصى للمرفقات هو {max}",
    "attachment.rejected.busy": "{name}: لا يمكن تعديل المرفقات أثناء إرسال البلاغ",
    "attachment.rejected.submitted": "{name}: لا يمكن تعديل المرفقات بعد إرسال البلاغ",

    # Submission
    "submit.login_required": "يجب تسجيل الدخول لإرسال بلاغ عن أضرار الكارثة.",
    "submit.failed": "فشل إرسال البلاغ. يرجى المحاولة مرة أخرى.",
    "success.report.submitted": "تم إرسال البلاغ بنجاح",

    # Error Messages - API
    "error.api.connection": "تعذر الاتصال بالخادم. يرجى التحقق من الاتصال.",
    "error.api.timeout": "استغرق الخادم وقتاً طويلاً للرد. يرجى المحاولة مرة أخرى.",
    "error.api.unauthorized": "انتهت صلاحية الجلسة. يرجى تسجيل الدخول مجدداً.",
    "error.unexpected": "حدث خطأ غير متوقع.",
}
