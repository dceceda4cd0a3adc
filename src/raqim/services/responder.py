"""Canned replies used when no LLM API key is configured.

Lets the chat flow (including quality scoring) run end to end in development
and in tests without network access.
"""

GREETING_REPLY = """أهلاً وسهلاً! أنا رقيم، مساعدك الذكي الشخصي.

**كيف يمكنني مساعدتك اليوم؟**

يمكنني مساعدتك في:
- إدارة المشاريع والأفكار
- إنشاء المحتوى بمراحل منظمة
- تنظيم القرارات والملاحظات
- الإجابة على استفساراتك

ما الذي تود البدء به؟"""

PROJECT_REPLY = """سأساعدك في إدارة مشروعك.

**خطوات البدء:**

1. **تحديد الهدف**: ما هو الهدف الرئيسي للمشروع؟
2. **تقسيم المهام**: قسّم المشروع إلى مهام صغيرة قابلة للتنفيذ
3. **جدولة زمنية**: حدد مواعيد نهائية واقعية
4. **المتابعة**: راجع التقدم بشكل دوري

**ملاحظة**: يمكنك استخدام لوحة Brain لتتبع المشاريع والقرارات.

هل تود إنشاء مشروع جديد الآن؟"""

CONTENT_REPLY = """سأساعدك في إنشاء محتوى عالي الجودة!

**مراحل إنشاء المحتوى في Workbench:**

| المرحلة | الوصف |
|---------|-------|
| 💡 الفكرة | توليد الأفكار الإبداعية |
| 🔍 البحث | جمع المعلومات والمصادر |
| 📋 المخطط | إنشاء هيكل المحتوى |
| ✍️ المسودة | كتابة النص الأولي |
| ✨ التحسين | مراجعة وتحسين الجودة |
| 📅 الجدولة | تحديد موعد النشر |

**نصائح:**
- ابدأ بفكرة واضحة ومحددة
- اجمع مصادر موثوقة
- راجع المحتوى أكثر من مرة

انتقل إلى Workbench للبدء في إنشاء محتواك!"""

DEFAULT_REPLY = """شكراً على رسالتك!

أنا رقيم، مساعدك الذكي. يمكنني مساعدتك في:

**الخدمات المتاحة:**
- إدارة المشاريع والأفكار
- إنشاء المحتوى
- تنظيم القرارات
- الإجابة على الأسئلة

**للبدء:**
استخدم لوحة Brain لإدارة مشاريعك، أو Workbench لإنشاء المحتوى.

كيف يمكنني مساعدتك اليوم؟"""

# First matching keyword group wins
_KEYWORD_REPLIES: list[tuple[tuple[str, ...], str]] = [
    (("مرحبا", "أهلا"), GREETING_REPLY),
    (("مشروع", "عمل"), PROJECT_REPLY),
    (("محتوى", "كتابة", "مقال"), CONTENT_REPLY),
]


def canned_reply(message: str) -> str:
    lowered = message.lower()
    for keywords, reply in _KEYWORD_REPLIES:
        if any(k in lowered for k in keywords):
            return reply
    return DEFAULT_REPLY
