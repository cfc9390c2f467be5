"""Embedded fallback catalog and user-facing message strings."""

from __future__ import annotations

FALLBACK_MENU: dict[str, list[dict[str, object]]] = {
    "Брускетты": [
        {"id": 9, "name": "Брускетта с вяленой свининой (шт)", "category": "Брускетты", "description": "Багет, Вяленая свинина, Огурец соленый, Томат, Майонез, Горчица столовая, Оливки зеленые без косточек", "price": 300, "image": ""},
        {"id": 10, "name": "Брускетта с гравлаксом (шт)", "category": "Брускетты", "description": "Багет, Гравлакс (филе лосося, лимон, апельсин, соль, сахар, свекла), Творожный сыр (соленый), Лимон", "price": 220, "image": ""},
        {"id": 11, "name": "Брускетта с грибной икрой (шт)", "category": "Брускетты", "description": "Багет, Грибная икра (Шампиньоны свежие, Лук репчатый, Морковь, Соль поваренная пищевая, Перец черный молотый, Томат), Петрушка свежая", "price": 120, "image": ""},
        {"id": 12, "name": "Брускетта с грушей и горгонзоллой (шт)", "category": "Брускетты", "description": "Багет, Груша вильямовка, Сыр горгонзолла, Орех грецкий, Масло сливочное 82%, Мед цветочный", "price": 350, "image": ""},
        {"id": 13, "name": "Брускетта с гуакамоле (шт)", "category": "Брускетты", "description": "Багет, Авокадо, Соль поваренная пищевая, Перец черный молотый, Лимонный сок, Перец красный сладкий", "price": 200, "image": ""},
        {"id": 14, "name": "Брускетта с паштетом из куриной печени (шт)", "category": "Брускетты", "description": "Багет, Паштет из куриной печени (Куриная печень и сердце, Масло растительное подсолнечное, Лук репчатый, Соль поваренная пищевая, Перец черный молотый), Петрушка свежая", "price": 90, "image": ""},
        {"id": 15, "name": "Брускетта с пршутом и персиком (шт)", "category": "Брускетты", "description": "Багет, Пршут свиной, Творожный сыр (соленый), Укроп сушеный, Персик", "price": 270, "image": ""},
        {"id": 16, "name": "Брускетта с рикоттой (шт)", "category": "Брускетты", "description": "Багет, Рикотта соленая, Перец красный сладкий, Петрушка свежая", "price": 90, "image": ""},
        {"id": 17, "name": "Брускетта с творожным сыром и сладким перцем (шт)", "category": "Брускетты", "description": "Багет, Творожный сыр (соленый), Перец красный сладкий", "price": 120, "image": ""},
        {"id": 18, "name": "Брускетта с хумусом и свежими овощами (шт)", "category": "Брускетты", "description": "Багет, Хумус нейтральный, Томат, Огурец, Лимонный сок, Петрушка свежая", "price": 100, "image": ""},
        {"id": 19, "name": "Брускетта с шампиньонами (шт)", "category": "Брускетты", "description": "Багет, Шампиньоны свежие, Томат черри, Петрушка свежая, Чеснок свежий", "price": 140, "image": ""},
    ],
    "Горячее": [
        {"id": 20, "name": "Баранья нога", "category": "Горячее", "description": "Баранина, Кориандр целый, Перец душистый горошек, Кумин цельный, Соль поваренная пищевая, Масло растительное подсолнечное", "price": 15500, "image": ""},
        {"id": 21, "name": "Куриный шашлычок с картофелем фри", "category": "Горячее", "description": "Курица, Соевый соус светлый, Кабачок, Лук репчатый, Перец красный сладкий, Перец черный молотый, Соль поваренная пищевая, Тимьян сушеный, Картофель фри, Масло растительное подсолнечное", "price": 550, "image": ""},
        {"id": 22, "name": "Овощи гриль", "category": "Горячее", "description": "Баклажан, Кабачок, Перец красный сладкий, Шампиньоны свежие, Соль поваренная пищевая, Перец черный молотый, Чеснок свежий, Масло растительное подсолнечное, Паприка сладкая молотая", "price": 650, "image": ""},
        {"id": 24, "name": "Свиная рулька", "category": "Горячее", "description": "Свинина (рулька), Морковь, Сельдерей корень, Чеснок свежий, Лук репчатый, Лавровый лист, Гвоздика целая, Перец душистый горошек, Тмин, Соль поваренная пищевая, Горчица Дижонская, Масло растительное подсолнечное", "price": 3100, "image": ""},
        {"id": 25, "name": "Свиной шашлычок", "category": "Горячее", "description": "Свинина, Розмарин сушеный, Перец черный молотый, Соль поваренная пищевая, Масло растительное подсолнечное, Соевый соус светлый, Кабачок", "price": 310, "image": ""},
        {"id": 26, "name": "Тушеная капуста", "category": "Горячее", "description": "Капуста белокочанная, Лавровый лист, Кориандр целый, Паприка сладкая молотая, Лук репчатый, Соль поваренная пищевая, Вегета, Чеснок свежий, Масло растительное подсолнечное, Сахар-песок, Томат, Огурец", "price": 870, "image": ""},
    ],
    "Закуски": [
        {"id": 27, "name": "Ассорти сыров и мясных деликатесов", "category": "Закуски", "description": "Пармезан, Сыр горгонзолла, Сыр Гауда, Сыр Моцарелла, Вяленая свинина, Хамон, Кулен/салями, Каперсы, Маслины без косточки, Вяленый томат", "price": 2000, "image": ""},
        {"id": 23, "name": "Рулетики из ветчины с сыром (2 шт)", "category": "Закуски", "description": "Ветчина из индейки, Сыр Гауда, Майонез, Паприка сладкая молотая, Чеснок свежий", "price": 450, "image": ""},
        {"id": 28, "name": "Хумус с баклажаном", "category": "Закуски", "description": "Баклажан, Хумус с запеченным перцем (Перец красный сладкий, Чеснок свежий, Нут консервированный, Тахини (паста), Масло растительное оливковое, Лимонный сок, Соль поваренная пищевая), Огурец, Перец красный сладкий", "price": 120, "image": ""},
    ],
    "Канапе": [
        {"id": 29, "name": "Канапе овощное", "category": "Канапе", "description": "Томат черри, Огурец, Перец красный сладкий, Баклажан", "price": 75, "image": ""},
        {"id": 30, "name": "Канапе с ветчиной", "category": "Канапе", "description": "Ветчина из индейки, Бородинский хлеб, Огурец соленый, Томат черри", "price": 90, "image": ""},
        {"id": 31, "name": "Канапе с грушей и пршутом", "category": "Канапе", "description": "Груша вильямовка, Пршут", "price": 140, "image": ""},
        {"id": 32, "name": "Канапе с креветкой и авокадо", "category": "Канапе", "description": "Авокадо, Креветка тигровая", "price": 240, "image": ""},
        {"id": 33, "name": "Канапе с салями и вяленым томатом", "category": "Канапе", "description": "Кулен, Бородинский хлеб, Томат черри, Салат зелёный листовой, Вяленый томат", "price": 180, "image": ""},
        {"id": 34, "name": "Канапе с салями и черным хлебом", "category": "Канапе", "description": "Салями, Бородинский хлеб, Огурец", "price": 90, "image": ""},
        {"id": 35, "name": "Канапе с сыром и виноградом", "category": "Канапе", "description": "Сыр Чеддер, Виноград белый, Сыр Гауда", "price": 130, "image": ""},
        {"id": 36, "name": "Канапе фруктовое", "category": "Канапе", "description": "Груша вильямовка, Виноград белый, Киви, Бананы", "price": 115, "image": ""},
    ],
    "Салаты": [
        {"id": 37, "name": "Винегрет (120 г)", "category": "Салаты", "description": "Картофель, Свекла, Морковь, Огурец соленый, Горошек зелёный консервированный., Лук репчатый, Масло растительное подсолнечное", "price": 175, "image": ""},
        {"id": 38, "name": "Крабовый салат (1 кг)", "category": "Салаты", "description": "Крабовые палочки (сурими), Яйцо куриное, Кукуруза консервированная, Рис пропаренный, Майонез", "price": 1800, "image": ""},
        {"id": 40, "name": "Крабовый салат (120 г)", "category": "Салаты", "description": "Крабовые палочки (сурими), Яйцо куриное, Кукуруза консервированная, Рис пропаренный, Майонез", "price": 450, "image": ""},
        {"id": 41, "name": "Оливье с говядиной (1 кг)", "category": "Салаты", "description": "Картофель, Огурец соленый, Морковь, Горошек зелёный консервированный., Говядина, Яйцо куриное, Майонез", "price": 2200, "image": "images/photos/olivie.jpg"},
        {"id": 42, "name": "Оливье с говядиной (120 г)", "category": "Салаты", "description": "Картофель, Огурец соленый, Морковь, Горошек зелёный консервированный., Говядина, Яйцо куриное, Майонез", "price": 250, "image": "images/photos/olivie.jpg"},
        {"id": 39, "name": "Селёдка под Шубой (1 кг)", "category": "Салаты", "description": "Свекла, Морковь, Картофель, Майонез, Сельдь", "price": 2100, "image": "images/photos/furherring.jpg"},
    ],
    "Тарталетки": [
        {"id": 43, "name": "Тарталетка с икрой (шт)", "category": "Тарталетки", "description": "Тарталетки-профитроли (молоко, вода, маргарин, мука, соль, сахар, яйцо куриное), Творожный сыр (соленый), Икра имитированная красная, Икра имитированная черная, Огурец", "price": 150, "image": ""},
        {"id": 44, "name": "Тарталетка с крабовым салатом (шт)", "category": "Тарталетки", "description": "Тарталетки-профитроли (молоко, вода, маргарин, мука, соль, сахар, яйцо куриное), Крабовый салат (Крабовые палочки (сурими), Кукуруза консервированная, Огурец, Рис пропаренный, Яйцо куриное, Майонез), Кукуруза консервированная, Икра имитированная красная, Икра имитированная черная", "price": 150, "image": ""},
        {"id": 45, "name": "Тарталетка с креветкой (шт)", "category": "Тарталетки", "description": "Тарталетки-профитроли (молоко, вода, маргарин, мука, соль, сахар, яйцо куриное), Творожный сыр (соленый), Креветка тигровая", "price": 180, "image": ""},
        {"id": 46, "name": "Тарталетка со свекольным муссом и сельдью (шт)", "category": "Тарталетки", "description": "Тарталетки-профитроли (молоко, вода, маргарин, мука, соль, сахар, яйцо куриное), Свекла, Майонез, Сельдь в масле", "price": 170, "image": ""},
        {"id": 47, "name": "Тарталетка со слабосоленым лососем (шт)", "category": "Тарталетки", "description": "Тарталетки-профитроли (молоко, вода, маргарин, мука, соль, сахар, яйцо куриное), Лосось слабосоленый (1кг) (филе лосося, лимон, апельсин, соль, сахар), Творожный сыр (соленый), Огурец", "price": 160, "image": ""},
    ],
}

FALLBACK_BANNERS: list[dict[str, object]] = [
    {"id": 2, "name": "Тарталетки-профитроли", "item_link": "https://ny2026.foodikal.rs/#Тарталетки", "image_url": "https://ny2026.foodikal.rs/images/photos/Foodikal-1.jpg", "display_order": 1},
    {"id": 3, "name": "Брускетты", "item_link": "https://ny2026.foodikal.rs/#Брускетты", "image_url": "https://ny2026.foodikal.rs/images/photos/Foodikal-4.jpg", "display_order": 2},
    {"id": 1, "name": "Селёдка под шубой", "item_link": "https://ny2026.foodikal.rs/#39", "image_url": "https://ny2026.foodikal.rs/images/photos/Foodikal-7.jpg", "display_order": 3},
    {"id": 4, "name": "Оливье с говядиной", "item_link": "https://ny2026.foodikal.rs/#42", "image_url": "https://ny2026.foodikal.rs/images/photos/Foodikal-9.jpg", "display_order": 4},
    {"id": 5, "name": "Винегрет", "item_link": "https://ny2026.foodikal.rs/#37", "image_url": "https://ny2026.foodikal.rs/images/photos/Foodikal-120.jpg", "display_order": 5},
    {"id": 6, "name": "Крабовый салат", "item_link": "https://ny2026.foodikal.rs/#40", "image_url": "https://ny2026.foodikal.rs/images/photos/Foodikal-130.jpg", "display_order": 6},
    {"id": 7, "name": "Ассорти сыров и мясных деликатесов", "item_link": "https://ny2026.foodikal.rs/#27", "image_url": "https://ny2026.foodikal.rs/images/photos/Foodikal-110.jpg", "display_order": 7},
]

PROMO_MESSAGES: dict[str, str] = {
    "too_short": "Минимум 3 символа",
    "bad_chars": "Только буквы и цифры",
    "needs_items": "Добавьте товары в корзину",
    "checking": "Проверка промокода...",
    "applied": "Промокод применен!",
    "invalid": "Промокод недействителен",
    "network": "Ошибка проверки промокода",
}

CHECKOUT_MESSAGES: dict[str, str] = {
    "empty_cart": "Ваша корзина пуста. Добавьте товары перед оформлением заказа.",
    "bad_name": "Пожалуйста, введите корректное имя (минимум 2 символа).",
    "bad_contact": "Пожалуйста, введите номер телефона или Telegram.",
    "bad_address": "Пожалуйста, введите корректный адрес доставки (минимум 5 символов).",
    "no_date": "Пожалуйста, выберите дату доставки.",
    "success": "Заказ успешно создан! Итого: {total} RSD. Наш менеджер свяжется с вами для подтверждения.",
    "promo_rejected": "Промокод недействителен. Пожалуйста, проверьте код или продолжите без промокода.",
    "failed": "Ошибка при создании заказа: {error}. Пожалуйста, попробуйте еще раз или свяжитесь с нами напрямую.",
    "in_flight": "Отправка...",
}

EMPTY_CART_MESSAGE = "Ваша корзина пуста"
