# This file is generated by `python -m isolang generate`; do not edit it directly.
"""English reference names, indexed by language discriminant."""

NAMES = (
    "Ghotuo",
    "Alumu-Tesu",
    "Ari",
    "Amal",
    "Arbëreshë Albanian",
    "Aranadan",
    "Ambrak",
    "Abu' Arapesh",
    "Arifama-Miniafia",
    "Ankave",
    "Afade",
    "Anambé",
    "Algerian Saharan Arabic",
    "Pará Arára",
    "Eastern Abnaki",
    "Afar",
    "Aasáx",
    "Arvanitika Albanian",
    "Abau",
    "Solong",
    "Mandobo Atas",
    "Amarasi",
    "Abé",
    "Bankon",
    "Ambala Ayta",
    "Manide",
    "Western Abnaki",
    "Abai Sungai",
    "Abaga",
    "Tajiki Arabic",
    "Abidji",
    "Aka-Bea",
    "Abkhazian",
    "Lampung Nyo",
    "Abanyom",
    "Abua",
    "Abon",
    "Abellen Ayta",
    "Abaza",
    "Abron",
    "Ambonese Malay",
    "Ambulas",
    "Abure",
    "Baharna Arabic",
    "Pal",
    "Inabaknon",
    "Aneme Wake",
    "Abui",
    "Achagua",
    "Áncá",
    "Gikyode",
    "Achinese",
    "Saint Lucian Creole French",
    "Acoli",
    "Aka-Cari",
    "Aka-Kora",
    "Akar-Bale",
    "Mesopotamian Arabic",
    "Achang",
    "Eastern Acipa",
    "Ta'izzi-Adeni Arabic",
    "Achi",
    "Acroá",
    "Achterhoeks",
    "Achuar-Shiwiar",
    "Achumawi",
    "Hijazi Arabic",
    "Omani Arabic",
    "Cypriot Arabic",
    "Acheron",
    "Adangme",
    "Atauran",
    "Lidzonka",
    "Adele",
    "Dhofari Arabic",
    "Andegerebinha",
    "Adhola",
    "Adi",
    "Adioukrou",
    "Galo",
    "Adang",
    "Abu",
    "Adangbe",
    "Adonara",
    "Adamorobe Sign Language",
    "Adnyamathanha",
    "Aduge",
    "Amundava",
    "Amdo Tibetan",
    "Adyghe",
    "Adzera",
    "Areba",
    "Tunisian Arabic",
    "Saidi Arabic",
    "Argentine Sign Language",
    "Northeast Pashai",
    "Haeke",
    "Ambele",
    "Arem",
    "Armenian Sign Language",
    "Aer",
    "Eastern Arrernte",
    "Alsea",
    "Akeu",
    "Ambakich",
    "Amele",
    "Aeka",
    "Gulf Arabic",
    "Andai",
    "Putukwam",
    "Afghan Sign Language",
    "Afrihili",
    "Akrukay",
    "Nanubae",
    "Defaka",
    "Eloyi",
    "Tapei",
    "Afrikaans",
    "Afro-Seminole Creole",
    "Afitti",
    "Awutu",
    "Obokuitai",
    "Aguano",
    "Legbo",
    "Agatu",
    "Agarabi",
    "Angal",
    "Arguni",
    "Angor",
    "Ngelima",
    "Agariya",
    "Argobba",
    "Isarog Agta",
    "Fembe",
    "Angaataha",
    "Agutaynen",
    "Tainae",
    "Aghem",
    "Aguaruna",
    "Esimbi",
    "Central Cagayan Agta",
    "Aguacateco",
    "Remontado Dumagat",
    "Kahua",
    "Aghul",
    "Southern Alta",
    "Mt. Iriga Agta",
    "Ahanta",
    "Axamb",
    "Qimant",
    "Aghu",
    "Tiagbamrin Aizi",
    "Akha",
    "Igo",
    "Mobumrin Aizi",
    "Àhàn",
    "Ahom",
    "Aproumu Aizi",
    "Ahirani",
    "Ashe",
    "Ahtena",
    "Arosi",
    "Ainu",
    "Ainbai",
    "Alngith",
    "Amara",
    "Agi",
    "Antigua and Barbuda Creole English",
    "Ai-Cham",
    "Assyrian Neo-Aramaic",
    "Lishanid Noshan",
    "Ake",
    "Aimele",
    "Aimol",
    "Ainu",
    "Aiton",
    "Burumakok",
    "Aimaq",
    "Airoran",
    "Arikem",
    "Aari",
    "Aighon",
    "Ali",
    "Aja",
    "Aja",
    "Ajië",
    "Andajin",
    "South Levantine Arabic",
    "Algerian Jewish Sign Language",
    "Judeo-Moroccan Arabic",
    "Ajawa",
    "Amri Karbi",
    "Akan",
    "Batak Angkola",
    "Mpur",
    "Ukpet-Ehom",
    "Akawaio",
    "Akpa",
    "Anakalangu",
    "Angal Heneng",
    "Aiome",
    "Aka-Jeru",
    "Akkadian",
    "Aklanon",
    "Aka-Bo",
    "Akurio",
    "Siwu",
    "Ak",
    "Araki",
    "Akaselem",
    "Akolet",
    "Akum",
    "Akhvakh",
    "Akwa",
    "Aka-Kede",
    "Aka-Kol",
    "Alabama",
    "Alago",
    "Qawasqar",
    "Alladian",
    "Aleut",
    "Alege",
    "Alawa",
    "Amaimon",
    "Alangan",
    "Alak",
    "Allar",
    "Amblong",
    "Gheg Albanian",
    "Larike-Wakasihu",
    "Alune",
    "Algonquin",
    "Alutor",
    "Tosk Albanian",
    "Southern Altai",
    "'Are'are",
    "Alaba-K’abeena",
    "Amol",
    "Alyawarr",
    "Alur",
    "Amanayé",
    "Ambo",
    "Amahuaca",
    "Yanesha'",
    "Hamer-Banna",
    "Amurdak",
    "Amharic",
    "Amis",
    "Amdang",
    "Ambai",
    "War-Jaintia",
    "Ama",
    "Amanab",
    "Amo",
    "Alamblak",
    "Amahai",
    "Amarakaeri",
    "Southern Amami-Oshima",
    "Amto",
    "Guerrero Amuzgo",
    "Ambelau",
    "Western Neo-Aramaic",
    "Anmatyerre",
    "Ami",
    "Atampaya",
    "Andaqui",
    "Andoa",
    "Ngas",
    "Ansus",
    "Xârâcùù",
    "Animere",
    "Old English",
    "Nend",
    "Andi",
    "Anor",
    "Goemai",
    "Anu-Hkongso Chin",
    "Anal",
    "Obolo",
    "Andoque",
    "Angika",
    "Jarawa",
    "Andh",
    "Anserma",
    "Antakarinya",
    "Anuak",
    "Denya",
    "Anaang",
    "Andra-Hus",
    "Anyin",
    "Anem",
    "Angolar",
    "Abom",
    "Pemon",
    "Andarum",
    "Angal Enen",
    "Bragat",
    "Angoram",
    "Anindilyakwa",
    "Mufian",
    "Arhö",
    "Alor",
    "Ömie",
    "Bumbita Arapesh",
    "Aore",
    "Taikat",
    "Atong",
    "A'ou",
    "Atorada",
    "Uab Meto",
    "Sa'a",
    "North Levantine Arabic",
    "Sudanese Arabic",
    "Bukiyip",
    "Pahanan Agta",
    "Ampanang",
    "Athpariya",
    "Apiaká",
    "Jicarilla Apache",
    "Kiowa Apache",
    "Lipan Apache",
    "Mescalero-Chiricahua Apache",
    "Apinayé",
    "Ambul",
    "Apma",
    "A-Pucikwar",
    "Arop-Lokep",
    "Arop-Sissano",
    "Apatani",
    "Apurinã",
    "Alapmunte",
    "Western Apache",
    "Aputai",
    "Apalaí",
    "Safeyoka",
    "Archi",
    "Ampari Dogon",
    "Arigidi",
    "Aninka",
    "Atohwaim",
    "Northern Alta",
    "Atakapa",
    "Arhâ",
    "Angaité",
    "Akuntsu",
    "Arabic",
    "Standard Arabic",
    "Official Aramaic",
    "Arabana",
    "Western Arrarnta",
    "Aragonese",
    "Arhuaco",
    "Arikara",
    "Arapaso",
    "Arikapú",
    "Arabela",
    "Mapudungun",
    "Araona",
    "Arapaho",
    "Algerian Arabic",
    "Karo",
    "Najdi Arabic",
    "Aruá",
    "Arbore",
    "Arawak",
    "Aruá",
    "Moroccan Arabic",
    "Egyptian Arabic",
    "Asu",
    "Assiniboine",
    "Casuarina Coast Asmat",
    "American Sign Language",
    "Auslan",
    "Cishingini",
    "Abishira",
    "Buruwai",
    "Sari",
    "Ashkun",
    "Asilulu",
    "Assamese",
    "Xingú Asuriní",
    "Dano",
    "Algerian Sign Language",
    "Austrian Sign Language",
    "Asuri",
    "Ipulo",
    "Asturian",
    "Tocantins Asurini",
    "Asoa",
    "Australian Aborigines Sign Language",
    "Muratayak",
    "Yaosakor Asmat",
    "As",
    "Pele-Ata",
    "Zaiwa",
    "Atsahuaca",
    "Ata Manobo",
    "Atemble",
    "Ivbie North-Okpela-Arhe",
    "Attié",
    "Atikamekw",
    "Ati",
    "Mt. Iraya Agta",
    "Ata",
    "Ashtiani",
    "Atong",
    "Pudtol Atta",
    "Aralle-Tabulahan",
    "Waimiri-Atroari",
    "Gros Ventre",
    "Pamplona Atta",
    "Reel",
    "Northern Altai",
    "Atsugewi",
    "Arutani",
    "Aneityum",
    "Arta",
    "Asumboa",
    "Alugu",
    "Waorani",
    "Anuta",
    "Aguna",
    "Aushi",
    "Anuki",
    "Awjilah",
    "Heyo",
    "Aulua",
    "Asu",
    "Molmo One",
    "Auyokawa",
    "Makayam",
    "Anus",
    "Aruek",
    "Austral",
    "Auye",
    "Awyi",
    "Aurá",
    "Awiyaana",
    "Uzbeki Arabic",
    "Avaric",
    "Avau",
    "Alviri-Vidari",
    "Avestan",
    "Avikam",
    "Kotava",
    "Eastern Egyptian Bedawi Arabic",
    "Angkamuthi",
    "Avatime",
    "Agavotaguerra",
    "Aushiri",
    "Au",
    "Avokaya",
    "Avá-Canoeiro",
    "Awadhi",
    "Awa",
    "Cicipu",
    "Awetí",
    "Anguthimri",
    "Awbono",
    "Aekyom",
    "Awabakal",
    "Arawum",
    "Awngi",
    "Awak",
    "Awera",
    "South Awyu",
    "Araweté",
    "Central Awyu",
    "Jair Awyu",
    "Awun",
    "Awara",
    "Edera Awyu",
    "Abipon",
    "Ayerrerenge",
    "Mato Grosso Arára",
    "Yaka",
    "Lower Southern Aranda",
    "Middle Armenian",
    "Xârâgurè",
    "Awar",
    "Ayizo Gbe",
    "Southern Aymara",
    "Ayabadhu",
    "Ayere",
    "Ginyanga",
    "Hadrami Arabic",
    "Leyigha",
    "Akuku",
    "Libyan Arabic",
    "Aymara",
    "Sanaani Arabic",
    "Ayoreo",
    "North Mesopotamian Arabic",
    "Ayi",
    "Central Aymara",
    "Sorsogon Ayta",
    "Magbukun Ayta",
    "Ayu",
    "Mai Brat",
    "Azha",
    "South Azerbaijani",
    "Eastern Durango Nahuatl",
    "Azerbaijani",
    "San Pedro Amuzgos Amuzgo",
    "North Azerbaijani",
    "Ipalapa Amuzgo",
    "Western Durango Nahuatl",
    "Awing",
    "Faire Atta",
    "Highland Puebla Nahuatl",
    "Babatana",
    "Bainouk-Gunyuño",
    "Badui",
    "Baré",
    "Nubaca",
    "Tuki",
    "Bahamas Creole English",
    "Barakai",
    "Bashkir",
    "Baluchi",
    "Bambara",
    "Balinese",
    "Waimaha",
    "Bantawa",
    "Bavarian",
    "Basa",
    "Bada",
    "Vengo",
    "Bambili-Bambui",
    "Bamun",
    "Batuley",
    "Baatonum",
    "Barai",
    "Batak Toba",
    "Bau",
    "Bangba",
    "Baibai",
    "Barama",
    "Bugan",
    "Barombi",
    "Ghomálá'",
    "Babanki",
    "Bats",
    "Babango",
    "Uneapa",
    "Northern Bobo Madaré",
    "West Central Banda",
    "Bamali",
    "Girawa",
    "Bakpinka",
    "Mburku",
    "Kulung",
    "Karnai",
    "Baba",
    "Bubia",
    "Befang",
    "Central Bai",
    "Bainouk-Samik",
    "Southern Balochi",
    "North Babar",
    "Bamenyam",
    "Bamu",
    "Baga Pokur",
    "Bariai",
    "Baoulé",
    "Bardi",
    "Bunuba",
    "Central Bikol",
    "Bannoni",
    "Bali",
    "Kaluli",
    "Bali",
    "Bench",
    "Babine",
    "Kohumono",
    "Bendi",
    "Awad Bing",
    "Shoo-Minda-Nye",
    "Bana",
    "Bacama",
    "Bainouk-Gunyaamolo",
    "Bayot",
    "Basap",
    "Emberá-Baudó",
    "Bunama",
    "Bade",
    "Biage",
    "Bonggi",
    "Baka",
    "Burun",
    "Bai",
    "Budukh",
    "Indonesian Bajau",
    "Buduma",
    "Baldemu",
    "Morom",
    "Bende",
    "Bahnar",
    "West Coast Bajau",
    "Burunge",
    "Bokoto",
    "Oroko",
    "Bodo Parja",
    "Baham",
    "Budong-Budong",
    "Bandjalang",
    "Badeshi",
    "Beaver",
    "Bebele",
    "Iceve-Maci",
    "Bedoanas",
    "Byangsi",
    "Benabena",
    "Belait",
    "Biali",
    "Bekati'",
    "Beja",
    "Bebeli",
    "Belarusian",
    "Bemba",
    "Bengali",
    "Beami",
    "Besoa",
    "Beembe",
    "Besme",
    "Guiberoua Béte",
    "Blagar",
    "Daloa Bété",
    "Betawi",
    "Jur Modo",
    "Beli",
    "Bena",
    "Bari",
    "Pauri Bareli",
    "Panyi Bai",
    "Bafut",
    "Betaf",
    "Bofi",
    "Busang Kayan",
    "Blafe",
    "British Sign Language",
    "Bafanji",
    "Ban Khor Sign Language",
    "Banda-Ndélé",
    "Mmen",
    "Bunak",
    "Malba Birifor",
    "Beba",
    "Badaga",
    "Bazigar",
    "Southern Bai",
    "Balti",
    "Gahri",
    "Bondo",
    "Bantayanon",
    "Bagheli",
    "Mahasu Pahari",
    "Gwamhi-Wuri",
    "Bobongko",
    "Haryanvi",
    "Rathwi Bareli",
    "Bauria",
    "Bangandu",
    "Bugun",
    "Giangan",
    "Bangolan",
    "Bit",
    "Bo",
    "Western Balochi",
    "Baga Koga",
    "Eastern Balochi",
    "Bagri",
    "Bawm Chin",
    "Tagabawa",
    "Bughotu",
    "Mbongno",
    "Warkay-Bipim",
    "Bhatri",
    "Balkan Gagauz Turkish",
    "Benggoi",
    "Banggai",
    "Bharia",
    "Bhili",
    "Biga",
    "Bhadrawahi",
    "Bhaya",
    "Odiai",
    "Binandere",
    "Bukharic",
    "Bhilali",
    "Bahing",
    "Bimin",
    "Bathari",
    "Bohtan Neo-Aramaic",
    "Bhojpuri",
    "Bima",
    "Tukang Besi South",
    "Bara Malagasy",
    "Buwal",
    "Bhattiyali",
    "Bhunjia",
    "Bahau",
    "Biak",
    "Bhalay",
    "Bhele",
    "Bada",
    "Badimaya",
    "Bissa",
    "Bidiyo",
    "Bepour",
    "Biafada",
    "Biangai",
    "Bikol",
    "Bile",
    "Bimoba",
    "Bini",
    "Nai",
    "Bila",
    "Bipi",
    "Bisorio",
    "Bislama",
    "Berinomo",
    "Biete",
    "Southern Birifor",
    "Kol",
    "Bijori",
    "Birhor",
    "Baloi",
    "Budza",
    "Banggarla",
    "Bariji",
    "Biao-Jiao Mien",
    "Barzani Jewish Neo-Aramaic",
    "Bidyogo",
    "Bahinemo",
    "Burji",
    "Kanauji",
    "Barok",
    "Bulu",
    "Bajelani",
    "Banjar",
    "Mid-Southern Banda",
    "Fanamaket",
    "Binumarien",
    "Bajan",
    "Balanta-Ganja",
    "Busuu",
    "Bedjond",
    "Bakwé",
    "Banao Itneg",
    "Bayali",
    "Baruga",
    "Kyak",
    "Baka",
    "Binukid",
    "Beeke",
    "Buraka",
    "Bakoko",
    "Baki",
    "Pande",
    "Brokskat",
    "Berik",
    "Kom",
    "Bukitan",
    "Kwa'",
    "Boko",
    "Bakairí",
    "Bakumpai",
    "Northern Sorsoganon",
    "Boloki",
    "Buhid",
    "Bekwarra",
    "Bekwel",
    "Baikeno",
    "Bokyi",
    "Bungku",
    "Siksika",
    "Bilua",
    "Bella Coola",
    "Bolango",
    "Balanta-Kentohe",
    "Buol",
    "Kuwaa",
    "Bolia",
    "Bolongan",
    "Pa'o Karen",
    "Biloxi",
    "Beli",
    "Southern Catanduanes Bikol",
    "Anii",
    "Blablanga",
    "Baluan-Pam",
    "Blang",
    "Balaesang",
    "Tai Dam",
    "Kibala",
    "Balangao",
    "Mag-Indi Ayta",
    "Notre",
    "Balantak",
    "Lame",
    "Bembe",
    "Biem",
    "Baga Manduri",
    "Limassa",
    "Bom-Kim",
    "Bamwe",
    "Kein",
    "Bagirmi",
    "Bote-Majhi",
    "Ghayavi",
    "Bomboli",
    "Northern Betsimisaraka Malagasy",
    "Bina",
    "Bambalang",
    "Bulgebi",
    "Bomu",
    "Muinane",
    "Bilma Kanuri",
    "Biao Mon",
    "Somba-Siawari",
    "Bum",
    "Bomwali",
    "Baimak",
    "Baramu",
    "Bonerate",
    "Bookan",
    "Bontok",
    "Banda",
    "Bintauna",
    "Masiwang",
    "Benga",
    "Bangi",
    "Eastern Tawbuid",
    "Bierebo",
    "Boon",
    "Batanga",
    "Bunun",
    "Bantoanon",
    "Bola",
    "Bantik",
    "Butmas-Tur",
    "Bundeli",
    "Bentong",
    "Bonerif",
    "Bisis",
    "Bangubangu",
    "Bintulu",
    "Beezen",
    "Bora",
    "Aweer",
    "Tibetan",
    "Mundabli",
    "Bolon",
    "Bamako Sign Language",
    "Boma",
    "Barbareño",
    "Anjam",
    "Bonjo",
    "Bole",
    "Berom",
    "Bine",
    "Tiemacèwè Bozo",
    "Bonkiman",
    "Bogaya",
    "Borôro",
    "Bosnian",
    "Bongo",
    "Bondei",
    "Tuwuli",
    "Rema",
    "Buamu",
    "Bodo",
    "Tiéyaxo Bozo",
    "Daakaka",
    "Mbuk",
    "Banda-Banda",
    "Bauni",
    "Bonggo",
    "Botlikh",
    "Bagupi",
    "Binji",
    "Orowe",
    "Broome Pearling Lugger Pidgin",
    "Biyom",
    "Dzao Min",
    "Anasi",
    "Kaure",
    "Banda Malay",
    "Koronadal Blaan",
    "Sarangani Blaan",
    "Barrow Point",
    "Bongu",
    "Bian Marind",
    "Bo",
    "Palya Bareli",
    "Bishnupriya",
    "Bilba",
    "Tchumbuli",
    "Bagusa",
    "Boko",
    "Bung",
    "Baga Kaloum",
    "Bago-Kusuntu",
    "Baima",
    "Bakhtiari",
    "Bandial",
    "Banda-Mbrès",
    "Bilakura",
    "Wumboko",
    "Bulgarian Sign Language",
    "Balo",
    "Busa",
    "Biritai",
    "Burusu",
    "Bosngun",
    "Bamukumbit",
    "Boguru",
    "Koro Wachi",
    "Buru",
    "Baangi",
    "Bengkala Sign Language",
    "Bakaka",
    "Braj",
    "Brao",
    "Berbice Creole Dutch",
    "Baraamu",
    "Breton",
    "Bira",
    "Baure",
    "Brahui",
    "Mokpwe",
    "Bieria",
    "Birked",
    "Birwa",
    "Barambu",
    "Boruca",
    "Brokkat",
    "Barapasi",
    "Breri",
    "Birao",
    "Baras",
    "Bitare",
    "Eastern Bru",
    "Western Bru",
    "Bellari",
    "Bodo",
    "Burui",
    "Bilbil",
    "Abinomn",
    "Brunei Bisaya",
    "Bassari",
    "Wushi",
    "Bauchi",
    "Bashkardi",
    "Kati",
    "Bassossi",
    "Bangwinji",
    "Burushaski",
    "Basa-Gumna",
    "Busami",
    "Barasana-Eduria",
    "Buso",
    "Baga Sitemu",
    "Bassa",
    "Bassa-Kontagora",
    "Akoose",
    "Basketo",
    "Bahonsuai",
    "Baga Sobané",
    "Baiso",
    "Yangkam",
    "Sabah Bisaya",
    "Bata",
    "Bati",
    "Batak Dairi",
    "Gamo-Ningi",
    "Birgit",
    "Gagnoa Bété",
    "Biatah Bidayuh",
    "Burate",
    "Bacanese Malay",
    "Batak Mandailing",
    "Ratagnon",
    "Rinconada Bikol",
    "Budibud",
    "Batek",
    "Baetora",
    "Batak Simalungun",
    "Bete-Bendi",
    "Batu",
    "Bateri",
    "Butuanon",
    "Batak Karo",
    "Bobot",
    "Batak Alas-Kluet",
    "Buriat",
    "Bua",
    "Bushi",
    "Ntcham",
    "Beothuk",
    "Bushoong",
    "Buginese",
    "Younuo Bunu",
    "Bongili",
    "Basa-Gurmana",
    "Bugawac",
    "Bulgarian",
    "Bulu",
    "Sherbro",
    "Terei",
    "Busoa",
    "Brem",
    "Bokobaru",
    "Bungain",
    "Budu",
    "Bun",
    "Bubi",
    "Boghom",
    "Bullom So",
    "Bukwen",
    "Barein",
    "Bube",
    "Baelelea",
    "Baeggu",
    "Berau Malay",
    "Boor",
    "Bonkeng",
    "Bure",
    "Belanda Viri",
    "Baan",
    "Bukat",
    "Bolivian Sign Language",
    "Bamunka",
    "Buna",
    "Bolgo",
    "Bumang",
    "Birri",
    "Burarra",
    "Bati",
    "Bukit Malay",
    "Baniva",
    "Boga",
    "Dibole",
    "Baybayanon",
    "Bauzi",
    "Bwatoo",
    "Namosi-Naitasiri-Serua",
    "Bwile",
    "Bwaidoka",
    "Bwe Karen",
    "Boselewa",
    "Barwe",
    "Bishuo",
    "Baniwa",
    "Láá Láá Bwamu",
    "Bauwaki",
    "Bwela",
    "Biwat",
    "Wunai Bunu",
    "Boro",
    "Mandobo Bawah",
    "Southern Bobo Madaré",
    "Bura-Pabir",
    "Bomboma",
    "Bafaw-Balong",
    "Buli",
    "Bwa",
    "Bu-Nao Bunu",
    "Cwi Bwamu",
    "Bwisi",
    "Tairaha",
    "Belanda Bor",
    "Molengue",
    "Pela",
    "Birale",
    "Bilur",
    "Bangala",
    "Buhutu",
    "Pirlatapa",
    "Bayungu",
    "Bukusu",
    "Jalkunan",
    "Mongolia Buriat",
    "Burduna",
    "Barikanchi",
    "Bebil",
    "Beele",
    "Russia Buriat",
    "Busam",
    "China Buriat",
    "Berakou",
    "Bankagooma",
    "Binahari",
    "Batak",
    "Bikya",
    "Ubaghara",
    "Benyadu'",
    "Pouye",
    "Bete",
    "Baygo",
    "Bhujel",
    "Buyu",
    "Bina",
    "Biao",
    "Bayono",
    "Bidjara",
    "Bilin",
    "Biyo",
    "Bumaji",
    "Basay",
    "Baruya",
    "Burak",
    "Berti",
    "Medumba",
    "Belhariya",
    "Qaqet",
    "Banaro",
    "Bandi",
    "Andio",
    "Southern Betsimisaraka Malagasy",
    "Bribri",
    "Jenaama Bozo",
    "Boikin",
    "Babuza",
    "Mapos Buang",
    "Bisu",
    "Belize Kriol English",
    "Nicaragua Creole English",
    "Boano",
    "Bolondo",
    "Boano",
    "Bozaba",
    "Kemberano",
    "Buli",
    "Biri",
    "Brazilian Sign Language",
    "Brithenig",
    "Burmeso",
    "Naami",
    "Basa",
    "Kɛlɛngaxo Bozo",
    "Obanliku",
    "Evant",
    "Chortí",
    "Garifuna",
    "Chuj",
    "Caddo",
    "Lehar",
    "Southern Carrier",
    "Nivaclé",
    "Cahuarano",
    "Chané",
    "Kaqchikel",
    "Carolinian",
    "Cemuhî",
    "Chambri",
    "Chácobo",
    "Chipaya",
    "Car Nicobarese",
    "Galibi Carib",
    "Tsimané",
    "Catalan",
    "Cavineña",
    "Callawalla",
    "Chiquitano",
    "Cayuga",
    "Canichana",
    "Cabiyarí",
    "Carapana",
    "Carijona",
    "Chimila",
    "Chachi",
    "Ede Cabe",
    "Chavacano",
    "Bualkhaw Chin",
    "Nyahkur",
    "Izora",
    "Tsucuba",
    "Cashibo-Cacataibo",
    "Cashinahua",
    "Chayahuita",
    "Candoshi-Shapra",
    "Cacua",
    "Kinabalian",
    "Carabayo",
    "Chamicuro",
    "Cafundo Creole",
    "Chopi",
    "Samba Daka",
    "Atsam",
    "Kasanga",
    "Cutchi-Swahili",
    "Malaccan Creole Malay",
    "Comaltepec Chinantec",
    "Chakma",
    "Cacaopera",
    "Choni",
    "Chenchu",
    "Chiru",
    "Chambeali",
    "Chodri",
    "Churahi",
    "Chepang",
    "Chaudangsi",
    "Min Dong Chinese",
    "Cinda-Regi-Tiyal",
    "Chadian Sign Language",
    "Chadong",
    "Koda",
    "Lower Chehalis",
    "Cebuano",
    "Chamacoco",
    "Eastern Khumi Chin",
    "Cen",
    "Czech",
    "Centúúm",
    "Ekai Chin",
    "Dijim-Bwilim",
    "Cara",
    "Como Karim",
    "Falam Chin",
    "Changriwa",
    "Kagayanen",
    "Chiga",
    "Chocangacakha",
    "Chamorro",
    "Chibcha",
    "Catawba",
    "Highland Oaxaca Chontal",
    "Chechen",
    "Tabasco Chontal",
    "Chagatai",
    "Chinook",
    "Ojitlán Chinantec",
    "Chuukese",
    "Cahuilla",
    "Mari",
    "Chinook jargon",
    "Choctaw",
    "Chipewyan",
    "Quiotepec Chinantec",
    "Cherokee",
    "Cholón",
    "Church Slavic",
    "Chuvash",
    "Chuwabu",
    "Chantyal",
    "Cheyenne",
    "Ozumacín Chinantec",
    "Cia-Cia",
    "Ci Gbe",
    "Chickasaw",
    "Chimariko",
    "Cineni",
    "Chinali",
    "Chitkuli Kinnauri",
    "Cimbrian",
    "Cinta Larga",
    "Chiapanec",
    "Tiri",
    "Chippewa",
    "Chaima",
    "Western Cham",
    "Chru",
    "Upper Chehalis",
    "Chamalal",
    "Chokwe",
    "Eastern Cham",
    "Chenapian",
    "Ashéninka Pajonal",
    "Cabécar",
    "Shor",
    "Chuave",
    "Jinyu Chinese",
    "Central Kurdish",
    "Chak",
    "Cibak",
    "Chakavian",
    "Kaang Chin",
    "Anufo",
    "Kajakse",
    "Kairak",
    "Tayo",
    "Chukot",
    "Koasati",
    "Kavalan",
    "Caka",
    "Cakfem-Mushere",
    "Cakchiquel-Quiché Mixed Language",
    "Ron",
    "Chilcotin",
    "Chaldean Neo-Aramaic",
    "Lealao Chinantec",
    "Chilisso",
    "Chakali",
    "Laitu Chin",
    "Idu-Mishmi",
    "Chala",
    "Clallam",
    "Lowland Oaxaca Chontal",
    "Lautu Chin",
    "Caluyanun",
    "Chulym",
    "Eastern Highland Chatino",
    "Maa",
    "Cerma",
    "Classical Mongolian",
    "Emberá-Chamí",
    "Campalagian",
    "Michigamea",
    "Mandarin Chinese",
    "Central Mnong",
    "Mro-Khimi Chin",
    "Messapic",
    "Camtho",
    "Changthang",
    "Chinbon Chin",
    "Côông",
    "Northern Qiang",
    "Hakha Chin",
    "Asháninka",
    "Khumi Chin",
    "Lalana Chinantec",
    "Con",
    "Northern Ping Chinese",
    "Chung",
    "Montenegrin",
    "Central Asmat",
    "Tepetotutla Chinantec",
    "Chenoua",
    "Ngawn Chin",
    "Middle Cornish",
    "Cocos Islands Malay",
    "Chicomuceltec",
    "Cocopa",
    "Cocama-Cocamilla",
    "Koreguaje",
    "Colorado",
    "Chong",
    "Chonyi-Dzihana-Kauma",
    "Cochimi",
    "Santa Teresa Cora",
    "Columbia-Wenatchi",
    "Comanche",
    "Cofán",
    "Comox",
    "Coptic",
    "Coquille",
    "Cornish",
    "Corsican",
    "Caquinte",
    "Wamey",
    "Cao Miao",
    "Cowlitz",
    "Nanti",
    "Chochotec",
    "Palantla Chinantec",
    "Ucayali-Yurúa Ashéninka",
    "Ajyíninka Apurucayali",
    "Cappadocian Greek",
    "Chinese Pidgin English",
    "Cherepon",
    "Kpeego",
    "Capiznon",
    "Pichis Ashéninka",
    "Pu-Xian Chinese",
    "South Ucayali Ashéninka",
    "Chuanqiandian Cluster Miao",
    "Chara",
    "Island Carib",
    "Lonwolwol",
    "Coeur d'Alene",
    "Cree",
    "Caramanta",
    "Michif",
    "Crimean Tatar",
    "Sãotomense",
    "Southern East Cree",
    "Plains Cree",
    "Northern East Cree",
    "Moose Cree",
    "El Nayar Cora",
    "Crow",
    "Iyo'wujwa Chorote",
    "Carolina Algonquian",
    "Seselwa Creole French",
    "Iyojwa'ja Chorote",
    "Chaura",
    "Chrau",
    "Carrier",
    "Cori",
    "Cruzeño",
    "Chiltepec Chinantec",
    "Kashubian",
    "Catalan Sign Language",
    "Chiangmai Sign Language",
    "Czech Sign Language",
    "Cuba Sign Language",
    "Chilean Sign Language",
    "Asho Chin",
    "Coast Miwok",
    "Songlai Chin",
    "Jola-Kasa",
    "Chinese Sign Language",
    "Central Sierra Miwok",
    "Colombian Sign Language",
    "Sochiapam Chinantec",
    "Southern Ping Chinese",
    "Croatia Sign Language",
    "Costa Rican Sign Language",
    "Southern Ohlone",
    "Northern Ohlone",
    "Sumtu Chin",
    "Swampy Cree",
    "Cambodian Sign Language",
    "Siyin Chin",
    "Coos",
    "Tataltepec Chatino",
    "Chetco",
    "Tedim Chin",
    "Tepinapa Chinantec",
    "Chittagonian",
    "Thaiphum Chin",
    "Tlacoatzintepec Chinantec",
    "Chitimacha",
    "Chhintange",
    "Emberá-Catío",
    "Western Highland Chatino",
    "Northern Catanduanes Bikol",
    "Wayanad Chetti",
    "Chol",
    "Moundadan Chetty",
    "Zacatepec Chatino",
    "Cua",
    "Cubeo",
    "Usila Chinantec",
    "Chuka",
    "Cuiba",
    "Mashco Piro",
    "San Blas Kuna",
    "Culina",
    "Cumanagoto",
    "Cupeño",
    "Cun",
    "Chhulung",
    "Teutila Cuicatec",
    "Tai Ya",
    "Cuvok",
    "Chukwa",
    "Tepeuxila Cuicatec",
    "Cuitlatec",
    "Chug",
    "Valle Nacional Chinantec",
    "Kabwa",
    "Maindo",
    "Woods Cree",
    "Kwere",
    "Chewong",
    "Kuwaataay",
    "Nopala Chatino",
    "Cayubaba",
    "Welsh",
    "Cuyonon",
    "Huizhou Chinese",
    "Knaanic",
    "Zenzontepec Chatino",
    "Min Zhong Chinese",
    "Zotung Chin",
    "Dangaléat",
    "Dambi",
    "Marik",
    "Duupa",
    "Dagbani",
    "Gwahatike",
    "Day",
    "Dar Fur Daju",
    "Dakota",
    "Dahalo",
    "Damakawa",
    "Danish",
    "Daai Chin",
    "Dandami Maria",
    "Dargwa",
    "Daho-Doo",
    "Dar Sila Daju",
    "Taita",
    "Davawenyo",
    "Dayi",
    "Dao",
    "Bangime",
    "Deno",
    "Dadiya",
    "Dabe",
    "Edopi",
    "Dogul Dom Dogon",
    "Doka",
    "Ida'an",
    "Dyirbal",
    "Duguri",
    "Duriankere",
    "Dulbu",
    "Duwai",
    "Daba",
    "Dabarre",
    "Ben Tey Dogon",
    "Bondum Dom Dogon",
    "Dungu",
    "Bankan Tey Dogon",
    "Dibiyaso",
    "Deccan",
    "Negerhollands",
    "Dadi Dadi",
    "Dongotono",
    "Doondo",
    "Fataluku",
    "West Goodenough",
    "Jaru",
    "Dendi",
    "Dido",
    "Dhudhuroa",
    "Donno So Dogon",
    "Dawera-Daweloor",
    "Dagik",
    "Dedua",
    "Dewoin",
    "Dezfuli",
    "Degema",
    "Dehwari",
    "Demisa",
    "Dek",
    "Delaware",
    "Dem",
    "Slave",
    "Pidgin Delaware",
    "Dendi",
    "Deori",
    "Desano",
    "German",
    "Domung",
    "Dengese",
    "Southern Dagaare",
    "Bunoge Dogon",
    "Casiguran Dumagat Agta",
    "Dagaari Dioula",
    "Degenan",
    "Doga",
    "Dghwede",
    "Northern Dagara",
    "Dagba",
    "Andaandi",
    "Dagoman",
    "Dogri",
    "Dogrib",
    "Dogoso",
    "Ndra'ngith",
    "Daungwurrung",
    "Doghoro",
    "Daga",
    "Dhundari",
    "Dhangu-Djangu",
    "Dhimal",
    "Dhalandji",
    "Zemba",
    "Dhanki",
    "Dhodia",
    "Dhargari",
    "Dhaiso",
    "Dhurga",
    "Dehu",
    "Dhanwar",
    "Dhungaloo",
    "Dia",
    "South Central Dinka",
    "Lakota Dida",
    "Didinga",
    "Dieri",
    "Digo",
    "Kumiai",
    "Dimbong",
    "Dai",
    "Southwestern Dinka",
    "Dilling",
    "Dime",
    "Dinka",
    "Dibo",
    "Northeastern Dinka",
    "Dimli",
    "Dirim",
    "Dimasa",
    "Diriku",
    "Dhivehi",
    "Northwestern Dinka",
    "Dixon Reef",
    "Diuwe",
    "Ding",
    "Djadjawurrung",
    "Djinba",
    "Dar Daju Daju",
    "Djamindjung",
    "Zarma",
    "Djangun",
    "Djinang",
    "Djeebbana",
    "Eastern Maroon Creole",
    "Jamsay Dogon",
    "Jawoyn",
    "Jangkang",
    "Djambarrpuyngu",
    "Kapriman",
    "Djawi",
    "Dakpakha",
    "Kadung",
    "Dakka",
    "Kuijau",
    "Southeastern Dinka",
    "Mazagway",
    "Dolgan",
    "Dahalik",
    "Dalmatian",
    "Darlong",
    "Duma",
    "Mombo Dogon",
    "Gavak",
    "Madhi Madhi",
    "Dugwor",
    "Medefaidrin",
    "Upper Kinabatangan",
    "Domaaki",
    "Dameli",
    "Dama",
    "Kemedzung",
    "East Damar",
    "Dampelas",
    "Dubu",
    "Dumpas",
    "Mudburra",
    "Dema",
    "Demta",
    "Upper Grand Valley Dani",
    "Daonda",
    "Ndendeule",
    "Dungan",
    "Lower Grand Valley Dani",
    "Dan",
    "Dengka",
    "Dzùùngoo",
    "Ndrulo",
    "Danaru",
    "Mid Grand Valley Dani",
    "Danau",
    "Danu",
    "Western Dani",
    "Dení",
    "Dom",
    "Dobu",
    "Northern Dong",
    "Doe",
    "Domu",
    "Dong",
    "Dogri",
    "Dondo",
    "Doso",
    "Toura",
    "Dongo",
    "Lukpa",
    "Dominican Sign Language",
    "Dori'o",
    "Dogosé",
    "Dass",
    "Dombe",
    "Doyayo",
    "Bussa",
    "Dompo",
    "Dorze",
    "Papar",
    "Dair",
    "Minderico",
    "Darmiya",
    "Dolpo",
    "Rungus",
    "C'Lela",
    "Paakantyi",
    "West Damar",
    "Daro-Matu Melanau",
    "Dura",
    "Gedeo",
    "Drents",
    "Rukai",
    "Darai",
    "Lower Sorbian",
    "Dutch Sign Language",
    "Daasanach",
    "Disa",
    "Danish Sign Language",
    "Dusner",
    "Desiya",
    "Tadaksahak",
    "Mardin Sign Language",
    "Daur",
    "Labuk-Kinabatangan Kadazan",
    "Ditidaht",
    "Adithinngithigh",
    "Ana Tinga Dogon",
    "Tene Kan Dogon",
    "Tomo Kan Dogon",
    "Daatsʼíin",
    "Tommo So Dogon",
    "Kadazan Dusun",
    "Lotud",
    "Toro So Dogon",
    "Toro Tegu Dogon",
    "Tebul Ure Dogon",
    "Dotyali",
    "Duala",
    "Dubli",
    "Duna",
    "Umiray Dumaget Agta",
    "Dumbea",
    "Duruma",
    "Dungra Bhil",
    "Dumun",
    "Uyajitaya",
    "Alabat Island Agta",
    "Middle Dutch",
    "Dusun Deyah",
    "Dupaninan Agta",
    "Duano",
    "Dusun Malang",
    "Dii",
    "Dumi",
    "Drung",
    "Duvle",
    "Dusun Witu",
    "Duungooma",
    "Dicamay Agta",
    "Duli-Gey",
    "Duau",
    "Diri",
    "Dawik Kui",
    "Dawro",
    "Dutton World Speedwords",
    "Dhuwal",
    "Dawawa",
    "Dhuwaya",
    "Dewas Rai",
    "Dyan",
    "Dyaberdyaber",
    "Dyugun",
    "Villa Viciosa Agta",
    "Djimini Senoufo",
    "Yanda Dom Dogon",
    "Dyangadi",
    "Jola-Fonyi",
    "Dyula",
    "Djabugay",
    "Tunzu",
    "Djiwarli",
    "Dazaga",
    "Dzalakha",
    "Dzando",
    "Dzongkha",
    "Karenggapa",
    "Beginci",
    "Ebughu",
    "Eastern Bontok",
    "Teke-Ebo",
    "Ebrié",
    "Embu",
    "Eteocretan",
    "Ecuadorian Sign Language",
    "Eteocypriot",
    "E",
    "Efai",
    "Efe",
    "Efik",
    "Ega",
    "Emilian",
    "Benamanga",
    "Eggon",
    "Egyptian",
    "Miyakubo Sign Language",
    "Ehueun",
    "Eipomek",
    "Eitiep",
    "Askopan",
    "Ejamat",
    "Ekajuk",
    "Ekit",
    "Ekari",
    "Eki",
    "Standard Estonian",
    "Kol",
    "Elip",
    "Koti",
    "Ekpeye",
    "Yace",
    "Eastern Kayah",
    "Elepi",
    "El Hugeirat",
    "Nding",
    "Elkei",
    "Modern Greek",
    "Eleme",
    "El Molo",
    "Elu",
    "Elamite",
    "Emai-Iuleha-Ora",
    "Embaloh",
    "Emerillon",
    "Eastern Meohang",
    "Mussau-Emira",
    "Eastern Maninkakan",
    "Mamulique",
    "Eman",
    "Northern Emberá",
    "Eastern Minyag",
    "Pacific Gulf Yupik",
    "Eastern Muria",
    "Emplawas",
    "Erromintxela",
    "Epigraphic Mayan",
    "Mbessa",
    "Apali",
    "Markweeta",
    "En",
    "Ende",
    "Forest Enets",
    "English",
    "Tundra Enets",
    "Enlhet",
    "Middle English",
    "Engenni",
    "Enggano",
    "Enga",
    "Emumu",
    "Enu",
    "Enwan",
    "Enwan",
    "Enxet",
    "Beti",
    "Epie",
    "Esperanto",
    "Eravallan",
    "Sie",
    "Eruwa",
    "Ogea",
    "South Efate",
    "Horpa",
    "Erre",
    "Ersu",
    "Eritai",
    "Erokwanas",
    "Ese Ejja",
    "Aheri Gondi",
    "Eshtehardi",
    "North Alaskan Inupiatun",
    "Northwest Alaska Inupiatun",
    "Egypt Sign Language",
    "Esuma",
    "Salvadoran Sign Language",
    "Estonian Sign Language",
    "Esselen",
    "Central Siberian Yupik",
    "Estonian",
    "Central Yupik",
    "Eskayan",
    "Etebi",
    "Etchemin",
    "Ethiopian Sign Language",
    "Eton",
    "Eton",
    "Edolo",
    "Yekhee",
    "Etruscan",
    "Ejagham",
    "Eten",
    "Semimi",
    "Basque",
    "Even",
    "Uvbie",
    "Evenki",
    "Ewe",
    "Ewondo",
    "Extremaduran",
    "Eyak",
    "Keiyo",
    "Ezaa",
    "Uzekwe",
    "Fasu",
    "Fa d'Ambu",
    "Wagi",
    "Fagani",
    "Finongan",
    "Baissa Fali",
    "Faiwol",
    "Faita",
    "Fang",
    "South Fali",
    "Fam",
    "Fang",
    "Faroese",
    "Paloor",
    "Fataleka",
    "Persian",
    "Fanti",
    "Fayu",
    "Fala",
    "Southwestern Fars",
    "Northwestern Fars",
    "West Albay Bikol",
    "Quebec Sign Language",
    "Feroge",
    "Foia Foia",
    "Maasina Fulfulde",
    "Fongoro",
    "Nobiin",
    "Fyer",
    "Faifi",
    "Fijian",
    "Filipino",
    "Finnish",
    "Fipa",
    "Firan",
    "Tornedalen Finnish",
    "Fiwaga",
    "Kirya-Konzəl",
    "Kven Finnish",
    "Kalispel-Pend d'Oreille",
    "Foau",
    "Fali",
    "North Fali",
    "Flinders Island",
    "Fuliiru",
    "Flaaitaal",
    "Fe'fe'",
    "Far Western Muria",
    "Fanbak",
    "Fanagalo",
    "Fania",
    "Foodo",
    "Foi",
    "Foma",
    "Fon",
    "Fore",
    "Siraya",
    "Fernando Po Creole English",
    "Fas",
    "French",
    "Cajun French",
    "Fordata",
    "Frankish",
    "Middle French",
    "Old French",
    "Arpitan",
    "Forak",
    "Northern Frisian",
    "Eastern Frisian",
    "Fortsenal",
    "Western Frisian",
    "Finnish Sign Language",
    "French Sign Language",
    "Finland-Swedish Sign Language",
    "Adamawa Fulfulde",
    "Pulaar",
    "East Futuna",
    "Borgu Fulfulde",
    "Pular",
    "Western Niger Fulfulde",
    "Bagirmi Fulfulde",
    "Ko",
    "Fulah",
    "Fum",
    "Fulniô",
    "Central-Eastern Niger Fulfulde",
    "Friulian",
    "Futuna-Aniwa",
    "Furu",
    "Nigerian Fulfulde",
    "Fuyug",
    "Fur",
    "Fwâi",
    "Fwe",
    "Ga",
    "Gabri",
    "Mixed Great Andamanese",
    "Gaddang",
    "Guarequena",
    "Gende",
    "Gagauz",
    "Alekano",
    "Borei",
    "Gadsup",
    "Gamkonora",
    "Galolen",
    "Kandawo",
    "Gan Chinese",
    "Gants",
    "Gal",
    "Gata'",
    "Galeya",
    "Adiwasi Garasia",
    "Kenati",
    "Mudhili Gadaba",
    "Nobonob",
    "Borana-Arsi-Guji Oromo",
    "Gayo",
    "West Central Oromo",
    "Gbaya",
    "Kaytetye",
    "Karajarri",
    "Niksek",
    "Gaikundi",
    "Gbanziri",
    "Defi Gbe",
    "Galela",
    "Bodo Gadaba",
    "Gaddi",
    "Gamit",
    "Garhwali",
    "Mo'da",
    "Northern Grebo",
    "Gbaya-Bossangoa",
    "Gbaya-Bozoum",
    "Gbagyi",
    "Gbesi Gbe",
    "Gagadu",
    "Gbanu",
    "Gabi-Gabi",
    "Eastern Xwla Gbe",
    "Gbari",
    "Zoroastrian Dari",
    "Mali",
    "Ganggalida",
    "Galice",
    "Guadeloupean Creole French",
    "Grenadian Creole English",
    "Gaina",
    "Guianese Creole French",
    "Colonia Tovar German",
    "Gade Lohar",
    "Pottangi Ollar Gadaba",
    "Gugu Badhun",
    "Gedaged",
    "Gude",
    "Guduf-Gava",
    "Ga'dang",
    "Gadjerawang",
    "Gundi",
    "Gurdjar",
    "Gadang",
    "Dirasha",
    "Laal",
    "Umanakaina",
    "Ghodoberi",
    "Mehri",
    "Wipi",
    "Ghandruk Sign Language",
    "Kungardutyi",
    "Gudu",
    "Godwari",
    "Geruma",
    "Kire",
    "Gboloo Grebo",
    "Gade",
    "Gerai",
    "Gengle",
    "Hutterite German",
    "Gebe",
    "Gen",
    "Ywom",
    "ut-Ma'in",
    "Geme",
    "Geser-Gorom",
    "Eviya",
    "Gera",
    "Garre",
    "Enya",
    "Geez",
    "Patpatar",
    "Gafat",
    "Gao",
    "Gbii",
    "Gugadj",
    "Gurr-goni",
    "Gurgula",
    "Kungarakany",
    "Ganglau",
    "Gitua",
    "Gagu",
    "Gogodala",
    "Ghadamès",
    "Hiberno-Scottish Gaelic",
    "Southern Ghale",
    "Northern Ghale",
    "Geko Karen",
    "Ghulfan",
    "Ghanongga",
    "Ghomara",
    "Ghera",
    "Guhu-Samane",
    "Kuke",
    "Kija",
    "Gibanawa",
    "Gail",
    "Gidar",
    "Gaɓogbo",
    "Goaria",
    "Githabul",
    "Girirra",
    "Gilbertese",
    "Gimi",
    "Hinukh",
    "Gimi",
    "Green Gelao",
    "Red Gelao",
    "North Giziga",
    "Gitxsan",
    "Mulao",
    "White Gelao",
    "Gilima",
    "Giyug",
    "South Giziga",
    "Kachi Koli",
    "Gunditjmara",
    "Gonja",
    "Gurindji Kriol",
    "Gujari",
    "Guya",
    "Magɨ",
    "Ndai",
    "Gokana",
    "Kok-Nar",
    "Guinea Kpelle",
    "ǂUngkue",
    "Scottish Gaelic",
    "Belning",
    "Bon Gula",
    "Nanai",
    "Irish",
    "Galician",
    "Northwest Pashai",
    "Gula Iro",
    "Gilaki",
    "Garlali",
    "Galambu",
    "Glaro-Twabo",
    "Gula",
    "Manx",
    "Glavda",
    "Gule",
    "Gambera",
    "Gula'alaa",
    "Mághdì",
    "Magɨyi",
    "Middle High German",
    "Middle Low German",
    "Gbaya-Mbodomo",
    "Gimnime",
    "Mirning",
    "Gumalu",
    "Gamo",
    "Magoma",
    "Mycenaean Greek",
    "Mgbolizhia",
    "Kaansa",
    "Gangte",
    "Guanche",
    "Zulgo-Gemzek",
    "Ganang",
    "Ngangam",
    "Lere",
    "Gooniyandi",
    "Ngen",
    "ǁGana",
    "Gangulu",
    "Ginuman",
    "Gumatj",
    "Northern Gondi",
    "Gana",
    "Gureng Gureng",
    "Guntai",
    "Gnau",
    "Western Bolivian Guaraní",
    "Ganzi",
    "Guro",
    "Playero",
    "Gorakor",
    "Godié",
    "Gongduk",
    "Gofa",
    "Gogo",
    "Old High German",
    "Gobasi",
    "Gowlan",
    "Gowli",
    "Gola",
    "Goan Konkani",
    "Gondi",
    "Gone Dau",
    "Yeretuar",
    "Gorap",
    "Gorontalo",
    "Gronings",
    "Gothic",
    "Gavar",
    "Goo",
    "Gorowa",
    "Gobu",
    "Goundo",
    "Gozarkhani",
    "Gupa-Abawa",
    "Ghanaian Pidgin English",
    "Taiap",
    "Ga'anda",
    "Guiqiong",
    "Guana",
    "Gor",
    "Qau",
    "Rajput Garasia",
    "Grebo",
    "Ancient Greek",
    "Guruntum-Mbaaru",
    "Madi",
    "Gbiri-Niragu",
    "Ghari",
    "Southern Grebo",
    "Kota Marudu Talantang",
    "Guarani",
    "Groma",
    "Gorovu",
    "Taznatit",
    "Gresi",
    "Garo",
    "Kistane",
    "Central Grebo",
    "Gweda",
    "Guriaso",
    "Barclayville Grebo",
    "Guramalum",
    "Ghanaian Sign Language",
    "German Sign Language",
    "Gusilay",
    "Guatemalan Sign Language",
    "Nema",
    "Southwest Gbaya",
    "Wasembo",
    "Greek Sign Language",
    "Swiss German",
    "Guató",
    "Aghu-Tharnggala",
    "Shiki",
    "Guajajára",
    "Wayuu",
    "Yocoboué Dida",
    "Gurindji",
    "Gupapuyngu",
    "Paraguayan Guaraní",
    "Guahibo",
    "Eastern Bolivian Guaraní",
    "Gujarati",
    "Gumuz",
    "Sea Island Creole English",
    "Guambiano",
    "Mbyá Guaraní",
    "Guayabero",
    "Gunwinggu",
    "Aché",
    "Farefare",
    "Guinean Sign Language",
    "Maléku Jaíka",
    "Yanomamö",
    "Gun",
    "Gourmanchéma",
    "Gusii",
    "Guana",
    "Guanano",
    "Duwet",
    "Golin",
    "Guajá",
    "Gulay",
    "Gurmana",
    "Kuku-Yalanji",
    "Gavião Do Jiparaná",
    "Pará Gavião",
    "Gurung",
    "Gumawana",
    "Guyani",
    "Mbato",
    "Gwa",
    "Gawri",
    "Gawwada",
    "Gweno",
    "Gowro",
    "Moo",
    "Gwichʼin",
    "ǀGwi",
    "Awngthim",
    "Gwandara",
    "Gwere",
    "Gawar-Bati",
    "Guwamu",
    "Kwini",
    "Gua",
    "Wè Southern",
    "Northwest Gbaya",
    "Garus",
    "Kayardild",
    "Gyem",
    "Gungabula",
    "Gbayi",
    "Gyele",
    "Gayil",
    "Ngäbere",
    "Guyanese Creole English",
    "Gyalsumdo",
    "Guarayu",
    "Gunya",
    "Geji",
    "Ganza",
    "Gazi",
    "Gane",
    "Han",
    "Hanoi Sign Language",
    "Gurani",
    "Hatam",
    "Eastern Oromo",
    "Haiphong Sign Language",
    "Hanga",
    "Hahon",
    "Haida",
    "Hajong",
    "Hakka Chinese",
    "Halang",
    "Hewa",
    "Hangaza",
    "Hakö",
    "Hupla",
    "Ha",
    "Harari",
    "Haisla",
    "Haitian",
    "Hausa",
    "Havu",
    "Hawaiian",
    "Southern Haida",
    "Haya",
    "Hazaragi",
    "Hamba",
    "Huba",
    "Heiban",
    "Ancient Hebrew",
    "Serbo-Croatian",
    "Habu",
    "Andaman Creole Hindi",
    "Huichol",
    "Northern Haida",
    "Honduras Sign Language",
    "Hadiyya",
    "Northern Qiandong Miao",
    "Hebrew",
    "Herdé",
    "Helong",
    "Hehe",
    "Heiltsuk",
    "Hemba",
    "Herero",
    "Haiǁom",
    "Haigwai",
    "Hoia Hoia",
    "Kerak",
    "Hoyahoya",
    "Lamang",
    "Hibito",
    "Hidatsa",
    "Fiji Hindi",
    "Kamwe",
    "Pamosu",
    "Hinduri",
    "Hijuk",
    "Seit-Kaitetu",
    "Hiligaynon",
    "Hindi",
    "Tsoa",
    "Himarimã",
    "Hittite",
    "Hiw",
    "Hixkaryána",
    "Haji",
    "Kahe",
    "Hunde",
    "Khah",
    "Hunjara-Kaina Ke",
    "Mel-Khaonh",
    "Hong Kong Sign Language",
    "Halia",
    "Halbi",
    "Halang Doan",
    "Hlersu",
    "Matu Chin",
    "Hieroglyphic Luwian",
    "Southern Mashan Hmong",
    "Humburi Senni Songhay",
    "Central Huishui Hmong",
    "Large Flowery Miao",
    "Eastern Huishui Hmong",
    "Hmong Don",
    "Southwestern Guiyang Hmong",
    "Southwestern Huishui Hmong",
    "Northern Huishui Hmong",
    "Ge",
    "Maek",
    "Luopohe Hmong",
    "Central Mashan Hmong",
    "Hmong",
    "Hiri Motu",
    "Northern Mashan Hmong",
    "Eastern Qiandong Miao",
    "Hmar",
    "Southern Qiandong Miao",
    "Hamtai",
    "Hamap",
    "Hmong Dô",
    "Western Mashan Hmong",
    "Southern Guiyang Hmong",
    "Hmong Shua",
    "Mina",
    "Southern Hindko",
    "Chhattisgarhi",
    "Hungu",
    "ǁAni",
    "Hani",
    "Hmong Njua",
    "Hanunoo",
    "Northern Hindko",
    "Caribbean Hindustani",
    "Hung",
    "Hoava",
    "Mari",
    "Ho",
    "Holma",
    "Horom",
    "Hobyót",
    "Holikachuk",
    "Hadothi",
    "Holu",
    "Homa",
    "Holoholo",
    "Hopi",
    "Horo",
    "Ho Chi Minh City Sign Language",
    "Hote",
    "Hovongan",
    "Honi",
    "Holiya",
    "Hozo",
    "Hpon",
    "Hawai'i Sign Language",
    "Hrangkhol",
    "Niwer Mil",
    "Hre",
    "Haruku",
    "Horned Miao",
    "Haroi",
    "Nhirrpi",
    "Hértevin",
    "Hruso",
    "Croatian",
    "Warwar Feni",
    "Hunsrik",
    "Harzani",
    "Upper Sorbian",
    "Hungarian Sign Language",
    "Hausa Sign Language",
    "Xiang Chinese",
    "Harsusi",
    "Hoti",
    "Minica Huitoto",
    "Hadza",
    "Hitu",
    "Middle Hittite",
    "Huambisa",
    "ǂHua",
    "Huaulu",
    "San Francisco Del Mar Huave",
    "Humene",
    "Huachipaeri",
    "Huilliche",
    "Huli",
    "Northern Guiyang Hmong",
    "Hulung",
    "Hula",
    "Hungana",
    "Hungarian",
    "Hu",
    "Hupa",
    "Tsat",
    "Halkomelem",
    "Huastec",
    "Humla",
    "Murui Huitoto",
    "San Mateo Del Mar Huave",
    "Hukumina",
    "Nüpode Huitoto",
    "Hulaulá",
    "Hunzib",
    "Haitian Vodoun Culture Language",
    "San Dionisio Del Mar Huave",
    "Haveke",
    "Sabu",
    "Santa María Del Mar Huave",
    "Wané",
    "Hawai'i Creole English",
    "Hwana",
    "Hya",
    "Armenian",
    "Western Armenian",
    "Iaai",
    "Iatmul",
    "Purari",
    "Iban",
    "Ibibio",
    "Iwaidja",
    "Akpes",
    "Ibanag",
    "Bih",
    "Ibaloi",
    "Agoi",
    "Ibino",
    "Igbo",
    "Ibuoro",
    "Ibu",
    "Ibani",
    "Ede Ica",
    "Etkywan",
    "Icelandic Sign Language",
    "Islander Creole English",
    "Idakho-Isukha-Tiriki",
    "Indo-Portuguese",
    "Idon",
    "Ede Idaca",
    "Idere",
    "Idi",
    "Ido",
    "Indri",
    "Idesa",
    "Idaté",
    "Idoma",
    "Amganad Ifugao",
    "Batad Ifugao",
    "Ifè",
    "Ifo",
    "Tuwali Ifugao",
    "Teke-Fuumu",
    "Mayoyao Ifugao",
    "Keley-I Kallahan",
    "Ebira",
    "Igede",
    "Igana",
    "Igala",
    "Kanggape",
    "Ignaciano",
    "Isebe",
    "Interglossa",
    "Igwe",
    "Iha Based Pidgin",
    "Ihievbe",
    "Iha",
    "Bidhawal",
    "Sichuan Yi",
    "Thiin",
    "Izon",
    "Biseni",
    "Ede Ije",
    "Kalabari",
    "Southeast Ijo",
    "Eastern Canadian Inuktitut",
    "Iko",
    "Ika",
    "Ikulu",
    "Olulumo-Ikom",
    "Ikpeshi",
    "Ikaranggal",
    "Inuit Sign Language",
    "Inuinnaqtun",
    "Inuktitut",
    "Iku-Gora-Ankwa",
    "Ikwere",
    "Ik",
    "Ikizu",
    "Ile Ape",
    "Ila",
    "Interlingue",
    "Garig-Ilgar",
    "Ili Turki",
    "Ilongot",
    "Iranun",
    "Iloko",
    "Iranun",
    "International Sign",
    "Ili'uun",
    "Ilue",
    "Mala Malasar",
    "Anamgura",
    "Miluk",
    "Imonda",
    "Imbongu",
    "Imroing",
    "Marsian",
    "Imotong",
    "Milyan",
    "Interlingua",
    "Inga",
    "Indonesian",
    "Degexit'an",
    "Ingush",
    "Jungle Inga",
    "Indonesian Sign Language",
    "Minaean",
    "Isinai",
    "Inoke-Yate",
    "Iñapari",
    "Indian Sign Language",
    "Intha",
    "Ineseño",
    "Inor",
    "Tuma-Irumu",
    "Iowa-Oto",
    "Ipili",
    "Inupiaq",
    "Ipiko",
    "Iquito",
    "Ikwo",
    "Iresim",
    "Irarutu",
    "Rigwe",
    "Iraqw",
    "Irántxe",
    "Ir",
    "Irula",
    "Kamberau",
    "Iraya",
    "Isabi",
    "Isconahua",
    "Isnag",
    "Italian Sign Language",
    "Irish Sign Language",
    "Esan",
    "Nkem-Nkum",
    "Ishkashimi",
    "Icelandic",
    "Masimasi",
    "Isanzu",
    "Isoko",
    "Israeli Sign Language",
    "Istriot",
    "Isu",
    "Italian",
    "Binongan Itneg",
    "Southern Tidung",
    "Itene",
    "Inlaod Itneg",
    "Judeo-Italian",
    "Itelmen",
    "Itu Mbon Uzo",
    "Itonama",
    "Iteri",
    "Isekiri",
    "Maeng Itneg",
    "Itawit",
    "Ito",
    "Itik",
    "Moyadan Itneg",
    "Itzá",
    "Iu Mien",
    "Ibatan",
    "Ivatan",
    "I-Wak",
    "Iwam",
    "Iwur",
    "Sepik Iwam",
    "Ixcatec",
    "Ixil",
    "Iyayu",
    "Mesaka",
    "Yaka",
    "Ingrian",
    "Izere",
    "Izii",
    "Jamamadí",
    "Hyam",
    "Popti'",
    "Jahanka",
    "Yabem",
    "Jara",
    "Jah Hut",
    "Zazao",
    "Jakun",
    "Yalahatan",
    "Jamaican Creole English",
    "Jandai",
    "Yanyuwa",
    "Yaqay",
    "New Caledonian Javanese",
    "Jakati",
    "Yaur",
    "Javanese",
    "Jambi Malay",
    "Yan-nhangu",
    "Jawe",
    "Judeo-Berber",
    "Badjiri",
    "Arandai",
    "Barikewa",
    "Bijim",
    "Nafusi",
    "Lojban",
    "Jofotek-Bromnya",
    "Jabutí",
    "Jukun Takum",
    "Yawijibaya",
    "Jamaican Country Sign Language",
    "Krymchak",
    "Jad",
    "Jadgali",
    "Judeo-Tat",
    "Jebero",
    "Jerung",
    "Jeh",
    "Yei",
    "Jeri Kuo",
    "Yelmek",
    "Dza",
    "Jere",
    "Manem",
    "Jonkor Bourmataguil",
    "Ngbee",
    "Judeo-Georgian",
    "Gwak",
    "Ngomba",
    "Jehai",
    "Jhankot Sign Language",
    "Jina",
    "Jibu",
    "Tol",
    "Bu",
    "Jilbe",
    "Jingulu",
    "sTodsde",
    "Jiiddu",
    "Jilim",
    "Jimi",
    "Jiamao",
    "Guanyinqiao",
    "Jita",
    "Youle Jinuo",
    "Shuar",
    "Buyuan Jinuo",
    "Jejueo",
    "Bankal",
    "Kaera",
    "Mobwa Karen",
    "Kubo",
    "Paku Karen",
    "Koro",
    "Amami Koniya Sign Language",
    "Labir",
    "Ngile",
    "Jamaican Sign Language",
    "Dima",
    "Zumbun",
    "Machame",
    "Yamdena",
    "Jimi",
    "Jumli",
    "Makuri Naga",
    "Kamara",
    "Mashi",
    "Mouwase",
    "Western Juxtlahuaca Mixtec",
    "Jangshung",
    "Jandavra",
    "Yangman",
    "Janji",
    "Yemsa",
    "Rawat",
    "Jaunsari",
    "Joba",
    "Wojenaka",
    "Jogi",
    "Jorá",
    "Jordanian Sign Language",
    "Jowulu",
    "Jewish Palestinian Aramaic",
    "Japanese",
    "Judeo-Persian",
    "Jaqaru",
    "Jarai",
    "Judeo-Arabic",
    "Jiru",
    "Jakattoe",
    "Japrería",
    "Japanese Sign Language",
    "Júma",
    "Wannu",
    "Jurchen",
    "Worodougou",
    "Hõne",
    "Ngadjuri",
    "Wapan",
    "Jirel",
    "Jumjum",
    "Juang",
    "Jiba",
    "Hupdë",
    "Jurúna",
    "Jumla Sign Language",
    "Jutish",
    "Ju",
    "Wãpha",
    "Juray",
    "Javindo",
    "Caribbean Javanese",
    "Jwira-Pepesa",
    "Jiarong",
    "Judeo-Yemeni Arabic",
    "Jaya",
    "Kara-Kalpak",
    "Kabyle",
    "Kachin",
    "Adara",
    "Ketangalan",
    "Katso",
    "Kajaman",
    "Kara",
    "Karekare",
    "Jju",
    "Kalanguya",
    "Kalaallisut",
    "Kamba",
    "Kannada",
    "Xaasongaxango",
    "Bezhta",
    "Capanahua",
    "Kashmiri",
    "Georgian",
    "Kanuri",
    "Katukína",
    "Kawi",
    "Kao",
    "Kamayurá",
    "Kazakh",
    "Kalarko",
    "Kaxuiâna",
    "Kadiwéu",
    "Kabardian",
    "Kanju",
    "Khamba",
    "Camsá",
    "Kaptiau",
    "Kari",
    "Grass Koiari",
    "Kanembu",
    "Iwal",
    "Kare",
    "Keliko",
    "Kabiyè",
    "Kamano",
    "Kafa",
    "Kande",
    "Abadi",
    "Kabutra",
    "Dera",
    "Kaiep",
    "Ap Ma",
    "Manga Kanuri",
    "Duhwa",
    "Khanty",
    "Kawacha",
    "Lubila",
    "Ngkâlmpw Kanum",
    "Kaivi",
    "Ukaan",
    "Tyap",
    "Vono",
    "Kamantan",
    "Kobiana",
    "Kalanga",
    "Kela",
    "Gula",
    "Nubi",
    "Kinalakna",
    "Kanga",
    "Kamo",
    "Katla",
    "Koenoem",
    "Kaian",
    "Kami",
    "Kete",
    "Kabwari",
    "Kachama-Ganjule",
    "Korandje",
    "Konongo",
    "Worimi",
    "Kutu",
    "Yankunytjatjara",
    "Makonde",
    "Mamusi",
    "Seba",
    "Tem",
    "Kumam",
    "Karamojong",
    "Numèè",
    "Tsikimba",
    "Kagoma",
    "Kunda",
    "Kaningdon-Nindem",
    "Koch",
    "Karaim",
    "Kuy",
    "Kadaru",
    "Koneraw",
    "Kam",
    "Keder",
    "Kwaja",
    "Kabuverdianu",
    "Kélé",
    "Keiga",
    "Kerewe",
    "Eastern Keres",
    "Kpessi",
    "Tese",
    "Keak",
    "Kei",
    "Kadar",
    "Kekchí",
    "Kela",
    "Kemak",
    "Kenyang",
    "Kakwa",
    "Kaikadi",
    "Kamar",
    "Kera",
    "Kugbo",
    "Ket",
    "Akebu",
    "Kanikkaran",
    "West Kewa",
    "Kukna",
    "Kupia",
    "Kukele",
    "Kodava",
    "Northwestern Kolami",
    "Konda-Dora",
    "Korra Koraga",
    "Kota",
    "Koya",
    "Kudiya",
    "Kurichiya",
    "Kannada Kurumba",
    "Kemiehua",
    "Kinnauri",
    "Kung",
    "Khunsari",
    "Kuk",
    "Koro",
    "Korwa",
    "Korku",
    "Kachhi",
    "Bilaspuri",
    "Kanjari",
    "Katkari",
    "Kurmukar",
    "Kharam Naga",
    "Kullu Pahari",
    "Kumaoni",
    "Koromfé",
    "Koyaga",
    "Kawe",
    "Komering",
    "Kube",
    "Kusunda",
    "Selangor Sign Language",
    "Gamale Kham",
    "Kaiwá",
    "Kunggari",
    "Karipúna",
    "Karingani",
    "Krongo",
    "Kaingang",
    "Kamoro",
    "Abun",
    "Kumbainggar",
    "Somyev",
    "Kobol",
    "Karas",
    "Karon Dori",
    "Kamaru",
    "Kyerung",
    "Khasi",
    "Lü",
    "Tukang Besi North",
    "Bädi Kanum",
    "Korowai",
    "Khuen",
    "Khams Tibetan",
    "Kehu",
    "Kuturmi",
    "Halh Mongolian",
    "Lusi",
    "Khmer",
    "Khandesi",
    "Khotanese",
    "Kapori",
    "Koyra Chiini Songhay",
    "Kharia",
    "Kasua",
    "Khamti",
    "Nkhumbi",
    "Khvarshi",
    "Khowar",
    "Kanu",
    "Kele",
    "Keapara",
    "Kim",
    "Koalib",
    "Kickapoo",
    "Koshin",
    "Kibet",
    "Eastern Parbate Kham",
    "Kimaama",
    "Kilmeri",
    "Kitsai",
    "Kilivila",
    "Kikuyu",
    "Kariya",
    "Karagas",
    "Kinyarwanda",
    "Kiowa",
    "Sheshi Kham",
    "Kosadle",
    "Kirghiz",
    "Kis",
    "Agob",
    "Kirmanjki",
    "Kimbu",
    "Northeast Kiwai",
    "Khiamniungan Naga",
    "Kirikiri",
    "Kisi",
    "Mlap",
    "Q'anjob'al",
    "Coastal Konjo",
    "Southern Kiwai",
    "Kisar",
    "Khmu",
    "Khakas",
    "Zabana",
    "Khinalugh",
    "Highland Konjo",
    "Western Parbate Kham",
    "Kháng",
    "Kunjen",
    "Harijan Kinnauri",
    "Pwo Eastern Karen",
    "Western Keres",
    "Kurudu",
    "East Kewa",
    "Phrae Pwo Karen",
    "Kashaya",
    "Kaikavian Literary Language",
    "Ramopa",
    "Erave",
    "Bumthangkha",
    "Kakanda",
    "Kwerisa",
    "Odoodee",
    "Kinuku",
    "Kakabe",
    "Kalaktang Monpa",
    "Mabaka Valley Kalinga",
    "Khün",
    "Kagulu",
    "Kako",
    "Kokota",
    "Kosarek Yale",
    "Kiong",
    "Kon Keu",
    "Karko",
    "Gugubera",
    "Kaeku",
    "Kir-Balar",
    "Giiwo",
    "Koi",
    "Tumi",
    "Kangean",
    "Teke-Kukuya",
    "Kohin",
    "Guugu Yimidhirr",
    "Kaska",
    "Klamath-Modoc",
    "Kiliwa",
    "Kolbila",
    "Gamilaraay",
    "Kulung",
    "Kendeje",
    "Tagakaulo",
    "Weliki",
    "Kalumpang",
    "Khalaj",
    "Kono",
    "Kagan Kalagan",
    "Migum",
    "Kalenjin",
    "Kapya",
    "Kamasa",
    "Rumu",
    "Khaling",
    "Kalasha",
    "Nukna",
    "Klao",
    "Maskelynes",
    "Tado",
    "Koluwawa",
    "Kalao",
    "Kabola",
    "Konni",
    "Kimbundu",
    "Southern Dong",
    "Majukayang Kalinga",
    "Bakole",
    "Kare",
    "Kâte",
    "Kalam",
    "Kami",
    "Kumarbhag Paharia",
    "Limos Kalinga",
    "Tanudan Kalinga",
    "Kom",
    "Awtuw",
    "Kwoma",
    "Gimme",
    "Kwama",
    "Northern Kurdish",
    "Kamasau",
    "Kemtuik",
    "Kanite",
    "Karipúna Creole French",
    "Komo",
    "Waboda",
    "Koma",
    "Khorasani Turkish",
    "Dera",
    "Lubuagan Kalinga",
    "Central Kanuri",
    "Konda",
    "Kankanaey",
    "Mankanya",
    "Koongo",
    "Kanufi",
    "Western Kanjobal",
    "Kuranko",
    "Keninjal",
    "Kanamarí",
    "Konkani",
    "Kono",
    "Kwanja",
    "Kintaq",
    "Kaningra",
    "Kensiu",
    "Panoan Katukína",
    "Kono",
    "Tabo",
    "Kung-Ekoka",
    "Kendayan",
    "Kanyok",
    "Kalamsé",
    "Konomala",
    "Kpati",
    "Kodi",
    "Kacipo-Bale Suri",
    "Kubi",
    "Cogui",
    "Koyo",
    "Komi-Permyak",
    "Konkani",
    "Kol",
    "Komi",
    "Kongo",
    "Konzo",
    "Waube",
    "Kota",
    "Korean",
    "Kosraean",
    "Lagwan",
    "Koke",
    "Kudu-Camo",
    "Kugama",
    "Koyukon",
    "Korak",
    "Kutto",
    "Mullu Kurumba",
    "Curripaco",
    "Koba",
    "Kpelle",
    "Komba",
    "Kapingamarangi",
    "Kplang",
    "Kofei",
    "Karajá",
    "Kpan",
    "Kpala",
    "Koho",
    "Kepkiriwát",
    "Ikposo",
    "Korupun-Sela",
    "Korafe-Yegha",
    "Tehit",
    "Karata",
    "Kafoa",
    "Komi-Zyrian",
    "Kobon",
    "Mountain Koiali",
    "Koryak",
    "Kupsabiny",
    "Mum",
    "Kovai",
    "Doromu-Koki",
    "Koy Sanjaq Surat",
    "Kalagan",
    "Kakabai",
    "Khe",
    "Kisankasa",
    "Koitabu",
    "Koromira",
    "Kotafon Gbe",
    "Kyenele",
    "Khisa",
    "Kaonde",
    "Eastern Krahn",
    "Kimré",
    "Krenak",
    "Kimaragang",
    "Northern Kissi",
    "Klias River Kadazan",
    "Seroa",
    "Okolod",
    "Kandas",
    "Mser",
    "Koorete",
    "Korana",
    "Kumhali",
    "Karkin",
    "Karachay-Balkar",
    "Kairui-Midiki",
    "Panará",
    "Koro",
    "Kurama",
    "Krio",
    "Kinaray-A",
    "Kerek",
    "Karelian",
    "Sapo",
    "Korop",
    "Krung",
    "Gbaya",
    "Tumari Kanuri",
    "Kurukh",
    "Kavet",
    "Western Krahn",
    "Karon",
    "Kryts",
    "Sota Kanum",
    "Shuwa-Zamani",
    "Shambala",
    "Southern Kalinga",
    "Kuanua",
    "Kuni",
    "Bafia",
    "Kusaghe",
    "Kölsch",
    "Krisa",
    "Uare",
    "Kansa",
    "Kumalu",
    "Kumba",
    "Kasiguranin",
    "Kofa",
    "Kaba",
    "Kwaami",
    "Borong",
    "Southern Kisi",
    "Winyé",
    "Khamyang",
    "Kusu",
    "S'gaw Karen",
    "Kedang",
    "Kharia Thar",
    "Kodaku",
    "Katua",
    "Kambaata",
    "Kholok",
    "Kokata",
    "Nubri",
    "Kwami",
    "Kalkutung",
    "Karanga",
    "North Muyu",
    "Plapo Krumen",
    "Kaniet",
    "Koroshi",
    "Kurti",
    "Karitiâna",
    "Kuot",
    "Kaduo",
    "Katabaga",
    "South Muyu",
    "Ketum",
    "Kituba",
    "Eastern Katu",
    "Kato",
    "Kaxararí",
    "Kango",
    "Juǀʼhoan",
    "Kuanyama",
    "Kutep",
    "Kwinsu",
    "'Auhelawa",
    "Kuman",
    "Western Katu",
    "Kupa",
    "Kushi",
    "Kuikúro-Kalapálo",
    "Kuria",
    "Kepo'",
    "Kulere",
    "Kumyk",
    "Kunama",
    "Kumukio",
    "Kunimaipa",
    "Karipuna",
    "Kurdish",
    "Kusaal",
    "Kutenai",
    "Upper Kuskokwim",
    "Kur",
    "Kpagua",
    "Kukatja",
    "Kuuku-Ya'u",
    "Kunza",
    "Bagvalal",
    "Kubu",
    "Kove",
    "Kui",
    "Kalabakan",
    "Kabalai",
    "Kuni-Boazi",
    "Komodo",
    "Kwang",
    "Psikye",
    "Korean Sign Language",
    "Kayaw",
    "Kendem",
    "Border Kuna",
    "Dobel",
    "Kompane",
    "Geba Karen",
    "Kerinci",
    "Lahta Karen",
    "Yinbaw Karen",
    "Kola",
    "Wersing",
    "Parkari Koli",
    "Yintale Karen",
    "Tsakwambo",
    "Dâw",
    "Kwa",
    "Likwala",
    "Kwaio",
    "Kwerba",
    "Kwara'ae",
    "Sara Kaba Deme",
    "Kowiai",
    "Awa-Cuaiquer",
    "Kwanga",
    "Kwakiutl",
    "Kofyar",
    "Kwambi",
    "Kwangali",
    "Kwomtari",
    "Kodia",
    "Kwer",
    "Kwese",
    "Kwesten",
    "Kwakum",
    "Sara Kaba Náà",
    "Kwinti",
    "Khirwar",
    "San Salvador Kongo",
    "Kwadi",
    "Kairiru",
    "Krobu",
    "Konso",
    "Brunei",
    "Manumanaw Karen",
    "Karo",
    "Keningau Murut",
    "Kulfa",
    "Zayein Karen",
    "Northern Khmer",
    "Kanowit-Tanjong Melanau",
    "Kanoé",
    "Wadiyara Koli",
    "Smärky Kanum",
    "Koro",
    "Kangjia",
    "Koiwat",
    "Kuvi",
    "Konai",
    "Likuba",
    "Kayong",
    "Kerewo",
    "Kwaya",
    "Butbut Kalinga",
    "Kyaka",
    "Karey",
    "Krache",
    "Kouya",
    "Keyagana",
    "Karok",
    "Kiput",
    "Karao",
    "Kamayo",
    "Kalapuya",
    "Kpatili",
    "Northern Binukidnon",
    "Kelon",
    "Kang",
    "Kenga",
    "Kuruáya",
    "Baram Kayan",
    "Kayagar",
    "Western Kayah",
    "Kayort",
    "Kudmali",
    "Rapoisi",
    "Kambaira",
    "Kayabí",
    "Western Karaboro",
    "Kaibobo",
    "Bondoukou Kulango",
    "Kadai",
    "Kosena",
    "Da'a Kaili",
    "Kikai",
    "Kelabit",
    "Kazukuru",
    "Kayeli",
    "Kais",
    "Kokola",
    "Kaningi",
    "Kaidipang",
    "Kaike",
    "Karang",
    "Sugut Dusun",
    "Kayupulau",
    "Komyandaret",
    "Karirí-Xocó",
    "Kamarian",
    "Kango",
    "Kalabra",
    "Southern Subanen",
    "Linear A",
    "Lacandon",
    "Ladino",
    "Pattani",
    "Lafofa",
    "Langi",
    "Lahnda",
    "Lambya",
    "Lango",
    "Lalia",
    "Lamba",
    "Laru",
    "Lao",
    "Laka",
    "Qabiao",
    "Larteh",
    "Lama",
    "Latin",
    "Laba",
    "Latvian",
    "Lauje",
    "Tiwa",
    "Lama Bai",
    "Aribwatsa",
    "Label",
    "Lakkia",
    "Lak",
    "Tinani",
    "Laopang",
    "La'bi",
    "Ladakhi",
    "Central Bontok",
    "Libon Bikol",
    "Lodhi",
    "Rmeet",
    "Laven",
    "Wampar",
    "Lohorung",
    "Libyan Sign Language",
    "Lachi",
    "Labu",
    "Lavatbura-Lamusong",
    "Tolaki",
    "Lawangan",
    "Lamalama",
    "Lardil",
    "Legenyem",
    "Lola",
    "Loncong",
    "Lubu",
    "Luchazi",
    "Lisela",
    "Tungag",
    "Western Lawa",
    "Luhu",
    "Lisabata-Nuniali",
    "Kla-Dan",
    "Dũya",
    "Luri",
    "Lenyima",
    "Lamja-Dengsa-Tola",
    "Laari",
    "Lemoro",
    "Leelau",
    "Kaan",
    "Landoma",
    "Láadan",
    "Loo",
    "Tso",
    "Lufu",
    "Lega-Shabunda",
    "Lala-Bisa",
    "Leco",
    "Lendu",
    "Lyélé",
    "Lelemi",
    "Lenje",
    "Lemio",
    "Lengola",
    "Leipon",
    "Lele",
    "Nomaande",
    "Lenca",
    "Leti",
    "Lepcha",
    "Lembena",
    "Lenkau",
    "Lese",
    "Lesing-Gelimi",
    "Kara",
    "Lamma",
    "Ledo Kaili",
    "Luang",
    "Lemolang",
    "Lezghian",
    "Lefa",
    "Lingua Franca Nova",
    "Lungga",
    "Laghu",
    "Lugbara",
    "Laghuu",
    "Lengilu",
    "Lingarak",
    "Wala",
    "Lega-Mwenga",
    "T'apo",
    "Lango",
    "Logba",
    "Lengo",
    "Pahi",
    "Longgu",
    "Ligenza",
    "Laha",
    "Laha",
    "Lahu Shi",
    "Lahul Lohar",
    "Lhomi",
    "Lahanan",
    "Lhokpu",
    "Mlahsö",
    "Lo-Toga",
    "Lahu",
    "West-Central Limba",
    "Likum",
    "Hlai",
    "Nyindrou",
    "Likila",
    "Limbu",
    "Ligbi",
    "Lihir",
    "Ligurian",
    "Lika",
    "Lillooet",
    "Limburgan",
    "Lingala",
    "Liki",
    "Sekpele",
    "Libido",
    "Liberian English",
    "Lisu",
    "Lithuanian",
    "Logorik",
    "Liv",
    "Col",
    "Liabuku",
    "Banda-Bambari",
    "Libinza",
    "Golpa",
    "Rampi",
    "Laiyolo",
    "Li'o",
    "Lampung Api",
    "Yirandali",
    "Yuru",
    "Lakalei",
    "Kabras",
    "Kucong",
    "Lakondê",
    "Kenyi",
    "Lakha",
    "Laki",
    "Remun",
    "Laeko-Libuat",
    "Kalaamaya",
    "Lakon",
    "Khayo",
    "Päri",
    "Kisa",
    "Lakota",
    "Kungkari",
    "Lokoya",
    "Lala-Roba",
    "Lolo",
    "Lele",
    "Ladin",
    "Lele",
    "Hermit",
    "Lole",
    "Lamu",
    "Teke-Laali",
    "Ladji Ladji",
    "Lelak",
    "Lilau",
    "Lasalimu",
    "Lele",
    "North Efate",
    "Lolak",
    "Lithuanian Sign Language",
    "Lau",
    "Lauan",
    "East Limba",
    "Merei",
    "Limilngan",
    "Lumun",
    "Pévé",
    "South Lembata",
    "Lamogai",
    "Lambichhong",
    "Lombi",
    "West Lembata",
    "Lamkang",
    "Hano",
    "Lambadi",
    "Lombard",
    "Limbum",
    "Lamatuka",
    "Lamalera",
    "Lamenu",
    "Lomaiviti",
    "Lake Miwok",
    "Laimbue",
    "Lamboya",
    "Langbashe",
    "Mbalanhu",
    "Lundayeh",
    "Langobardic",
    "Lanoh",
    "Daantanai'",
    "Leningitij",
    "South Central Banda",
    "Langam",
    "Lorediakarkar",
    "Lamnso'",
    "Longuda",
    "Lanima",
    "Lonzo",
    "Loloda",
    "Lobi",
    "Inonhan",
    "Saluan",
    "Logol",
    "Logo",
    "Narim",
    "Loma",
    "Lou",
    "Loko",
    "Mongo",
    "Loma",
    "Malawi Lomwe",
    "Lombo",
    "Lopa",
    "Lobala",
    "Téén",
    "Loniu",
    "Otuho",
    "Louisiana Creole",
    "Lopi",
    "Tampias Lobu",
    "Loun",
    "Loke",
    "Lozi",
    "Lelepa",
    "Lepki",
    "Long Phuri Naga",
    "Lipo",
    "Lopit",
    "Logir",
    "Rara Bakati'",
    "Northern Luri",
    "Laurentian",
    "Laragia",
    "Marachi",
    "Loarki",
    "Lari",
    "Marama",
    "Lorang",
    "Laro",
    "Southern Yamphu",
    "Larantuka Malay",
    "Larevat",
    "Lemerig",
    "Lasgerdi",
    "Burundian Sign Language",
    "Albarradas Sign Language",
    "Lishana Deni",
    "Lusengo",
    "Lish",
    "Lashi",
    "Latvian Sign Language",
    "Saamia",
    "Tibetan Sign Language",
    "Laos Sign Language",
    "Panamanian Sign Language",
    "Aruop",
    "Lasi",
    "Trinidad and Tobago Sign Language",
    "Sivia Sign Language",
    "Seychelles Sign Language",
    "Mauritian Sign Language",
    "Late Middle Chinese",
    "Latgalian",
    "Thur",
    "Leti",
    "Latundê",
    "Tsotso",
    "Tachoni",
    "Latu",
    "Luxembourgish",
    "Luba-Lulua",
    "Luba-Katanga",
    "Aringa",
    "Ludian",
    "Luvale",
    "Laua",
    "Ganda",
    "Luiseno",
    "Luna",
    "Lunanakha",
    "Olu'bo",
    "Luimbi",
    "Lunda",
    "Luo",
    "Lumbu",
    "Lucumi",
    "Laura",
    "Lushai",
    "Lushootseed",
    "Lumba-Yakkha",
    "Luwati",
    "Luo",
    "Luyia",
    "Southern Luri",
    "Maku'a",
    "Lavi",
    "Lavukaleve",
    "Standard Latvian",
    "Levuka",
    "Lwalu",
    "Lewo Eleng",
    "Wanga",
    "White Lachi",
    "Eastern Lawa",
    "Laomian",
    "Luwo",
    "Malawian Sign Language",
    "Lewotobi",
    "Lawu",
    "Lewo",
    "Lakurumau",
    "Layakha",
    "Lyngngam",
    "Luyana",
    "Literary Chinese",
    "Litzlitz",
    "Leinong Naga",
    "Laz",
    "San Jerónimo Tecóatl Mazatec",
    "Yutanduchi Mixtec",
    "Madurese",
    "Bo-Rukul",
    "Mafa",
    "Magahi",
    "Marshallese",
    "Maithili",
    "Jalapa De Díaz Mazatec",
    "Makasar",
    "Malayalam",
    "Mam",
    "Mandingo",
    "Chiquihuitlán Mazatec",
    "Marathi",
    "Masai",
    "San Francisco Matlatzinca",
    "Huautla Mazatec",
    "Sateré-Mawé",
    "Mampruli",
    "North Moluccan Malay",
    "Central Mazahua",
    "Higaonon",
    "Western Bukidnon Manobo",
    "Macushi",
    "Dibabawon Manobo",
    "Molale",
    "Baba Malay",
    "Mangseng",
    "Ilianen Manobo",
    "Nadëb",
    "Malol",
    "Maxakalí",
    "Ombamba",
    "Macaguán",
    "Mbo",
    "Malayo",
    "Maisin",
    "Nukak Makú",
    "Sarangani Manobo",
    "Matigsalug Manobo",
    "Mbula-Bwazza",
    "Mbulungish",
    "Maring",
    "Mari",
    "Memoni",
    "Amoltepec Mixtec",
    "Maca",
    "Machiguenga",
    "Bitur",
    "Sharanahua",
    "Itundujia Mixtec",
    "Matsés",
    "Mapoyo",
    "Maquiritari",
    "Mese",
    "Mvanip",
    "Mbunda",
    "Macaguaje",
    "Malaccan Creole Portuguese",
    "Masana",
    "Coatlán Mixe",
    "Makaa",
    "Ese",
    "Menya",
    "Mambai",
    "Mengisa",
    "Cameroon Mambila",
    "Minanibai",
    "Mawa",
    "Mpiemo",
    "South Watut",
    "Mawan",
    "Mada",
    "Morigi",
    "Male",
    "Mbum",
    "Maba",
    "Moksha",
    "Massalat",
    "Maguindanaon",
    "Mamvu",
    "Mangbetu",
    "Mangbutu",
    "Maltese Sign Language",
    "Mayogo",
    "Mbati",
    "Mbala",
    "Mbole",
    "Mandar",
    "Maria",
    "Mbere",
    "Mboko",
    "Santa Lucía Monteverde Mixtec",
    "Mbosi",
    "Dizin",
    "Male",
    "Suruí Do Pará",
    "Menka",
    "Ikobi",
    "Marra",
    "Melpa",
    "Mengen",
    "Megam",
    "Southwestern Tlaxiaco Mixtec",
    "Midob",
    "Meyah",
    "Mekeo",
    "Central Melanau",
    "Mangala",
    "Mende",
    "Kedah Malay",
    "Miriwoong",
    "Merey",
    "Meru",
    "Masmaje",
    "Mato",
    "Motu",
    "Mano",
    "Maaka",
    "Hassaniyya",
    "Menominee",
    "Pattani Malay",
    "Bangka",
    "Mba",
    "Mendankwe-Nkwen",
    "Morisyen",
    "Naki",
    "Mogofin",
    "Matal",
    "Wandala",
    "Mefele",
    "North Mofu",
    "Putai",
    "Marghi South",
    "Cross River Mbembe",
    "Mbe",
    "Makassar Malay",
    "Moba",
    "Marrithiyel",
    "Mexican Sign Language",
    "Mokerang",
    "Mbwela",
    "Mandjak",
    "Mulaha",
    "Melo",
    "Mayo",
    "Mabaan",
    "Middle Irish",
    "Mararit",
    "Morokodo",
    "Moru",
    "Mango",
    "Maklew",
    "Mpumpong",
    "Makhuwa-Meetto",
    "Lijili",
    "Abureni",
    "Mawes",
    "Maleu-Kilenge",
    "Mambae",
    "Mbangi",
    "Meta'",
    "Eastern Magar",
    "Malila",
    "Mambwe-Lungu",
    "Manda",
    "Mongol",
    "Mailu",
    "Matengo",
    "Matumbi",
    "Mbunga",
    "Mbugwe",
    "Manda",
    "Mahongwe",
    "Mocho",
    "Mbugu",
    "Besisi",
    "Mamaa",
    "Margu",
    "Ma'di",
    "Mogholi",
    "Mungaka",
    "Mauwake",
    "Makhuwa-Moniga",
    "Mócheno",
    "Mashi",
    "Balinese Malay",
    "Mandan",
    "Eastern Mari",
    "Buru",
    "Mandahuaca",
    "Digaro-Mishmi",
    "Mbukushu",
    "Maru",
    "Ma'anyan",
    "Mor",
    "Miami",
    "Atatláhuca Mixtec",
    "Mi'kmaq",
    "Mandaic",
    "Ocotepec Mixtec",
    "Mofu-Gudur",
    "San Miguel El Grande Mixtec",
    "Chayuco Mixtec",
    "Chigmecatitlán Mixtec",
    "Abar",
    "Mikasuki",
    "Peñoles Mixtec",
    "Alacatlatzala Mixtec",
    "Minangkabau",
    "Pinotepa Nacional Mixtec",
    "Apasco-Apoala Mixtec",
    "Mískito",
    "Isthmus Mixe",
    "Uncoded languages",
    "Southern Puebla Mixtec",
    "Cacaloxtepec Mixtec",
    "Akoye",
    "Mixtepec Mixtec",
    "Ayutla Mixtec",
    "Coatzospan Mixtec",
    "Makalero",
    "San Juan Colorado Mixtec",
    "Northwest Maidu",
    "Muskum",
    "Tu",
    "Mwera",
    "Kim Mun",
    "Mawak",
    "Matukar",
    "Mandeali",
    "Medebur",
    "Ma",
    "Malankuravan",
    "Malapandaram",
    "Malaryan",
    "Malavedan",
    "Miship",
    "Sauria Paharia",
    "Manna-Dora",
    "Mannan",
    "Karbi",
    "Mahali",
    "Mahican",
    "Majhi",
    "Mbre",
    "Mal Paharia",
    "Siliput",
    "Macedonian",
    "Mawchi",
    "Miya",
    "Mak",
    "Dhatki",
    "Mokilese",
    "Byep",
    "Mokole",
    "Moklen",
    "Kupang Malay",
    "Mingang Doso",
    "Moikodi",
    "Bay Miwok",
    "Malas",
    "Silacayoapan Mixtec",
    "Vamale",
    "Konyanka Maninka",
    "Mafea",
    "Kituba",
    "Kinamiging Manobo",
    "East Makian",
    "Makasae",
    "Malo",
    "Mbule",
    "Cao Lan",
    "Manambu",
    "Mal",
    "Malagasy",
    "Mape",
    "Malimpung",
    "Miltu",
    "Ilwana",
    "Malua Bay",
    "Mulam",
    "Malango",
    "Mlomp",
    "Bargam",
    "Western Maninkakan",
    "Vame",
    "Masalit",
    "Maltese",
    "To'abaita",
    "Motlav",
    "Moloko",
    "Malfaxal",
    "Malaynon",
    "Mama",
    "Momina",
    "Michoacán Mazahua",
    "Maonan",
    "Mae",
    "Mundat",
    "North Ambrym",
    "Mehináku",
    "Musar",
    "Majhwar",
    "Mukha-Dora",
    "Man Met",
    "Maii",
    "Mamanwa",
    "Mangga Buang",
    "Siawi",
    "Musak",
    "Western Xiangxi Miao",
    "Malalamai",
    "Mmaala",
    "Miriti",
    "Emae",
    "Madak",
    "Migaama",
    "Mabaale",
    "Mbula",
    "Muna",
    "Manchu",
    "Mondé",
    "Naba",
    "Mundani",
    "Eastern Mnong",
    "Mono",
    "Manipuri",
    "Munji",
    "Mandinka",
    "Tiale",
    "Mapena",
    "Southern Mnong",
    "Min Bei Chinese",
    "Minriq",
    "Mono",
    "Mansi",
    "Mer",
    "Rennell-Bellona",
    "Mon",
    "Manikion",
    "Manyawa",
    "Moni",
    "Mwan",
    "Mocoví",
    "Mobilian",
    "Innu",
    "Mongondow",
    "Mohawk",
    "Mboi",
    "Monzombo",
    "Morori",
    "Mangue",
    "Mongolian",
    "Monom",
    "Mopán Maya",
    "Mor",
    "Moro",
    "Mossi",
    "Barí",
    "Mogum",
    "Mohave",
    "Moi",
    "Molima",
    "Shekkacho",
    "Mukulu",
    "Mpoto",
    "Malak Malak",
    "Mangarrayi",
    "Machinere",
    "Majang",
    "Marba",
    "Maung",
    "Mpade",
    "Martu Wangka",
    "Mbara",
    "Middle Watut",
    "Yosondúa Mixtec",
    "Mindiri",
    "Miu",
    "Migabac",
    "Matís",
    "Vangunu",
    "Dadibi",
    "Mian",
    "Makuráp",
    "Mungkip",
    "Mapidian",
    "Misima-Panaeati",
    "Mapia",
    "Mpi",
    "Maba",
    "Mbuko",
    "Mangole",
    "Matepi",
    "Momuna",
    "Kota Bangun Kutai Malay",
    "Tlazoyaltepec Mixtec",
    "Mariri",
    "Mamasa",
    "Rajah Kabunsuwan Manobo",
    "Mbelime",
    "South Marquesan",
    "Moronene",
    "Modole",
    "Manipa",
    "Minokok",
    "Mander",
    "West Makian",
    "Mok",
    "Mandari",
    "Mosimo",
    "Murupi",
    "Mamuju",
    "Manggarai",
    "Pano",
    "Mlabri",
    "Marino",
    "Maricopa",
    "Western Magar",
    "Martha's Vineyard Sign Language",
    "Elseng",
    "Mising",
    "Mara Chin",
    "Maori",
    "Western Mari",
    "Hmwaveke",
    "Mortlockese",
    "Merlav",
    "Cheke Holo",
    "Mru",
    "Morouas",
    "North Marquesan",
    "Maria",
    "Maragus",
    "Marghi Central",
    "Mono",
    "Mangareva",
    "Maranao",
    "Maremgi",
    "Mandaya",
    "Marind",
    "Malay",
    "Masbatenyo",
    "Sankaran Maninka",
    "Yucatec Maya Sign Language",
    "Musey",
    "Mekwei",
    "Moraid",
    "Masikoro Malagasy",
    "Sabah Malay",
    "Ma",
    "Mansaka",
    "Molof",
    "Agusan Manobo",
    "Vurës",
    "Mombum",
    "Maritsauá",
    "Caac",
    "Mongolian Sign Language",
    "West Masela",
    "Musom",
    "Maslam",
    "Mansoanka",
    "Moresada",
    "Aruamu",
    "Momare",
    "Cotabato Manobo",
    "Anyin Morofo",
    "Munit",
    "Mualang",
    "Mono",
    "Murik",
    "Una",
    "Munggui",
    "Maiwa",
    "Moskona",
    "Mbe'",
    "Montol",
    "Mator",
    "Matagalpa",
    "Totontepec Mixe",
    "Wichí Lhamtés Nocten",
    "Muong",
    "Mewari",
    "Yora",
    "Mota",
    "Tututepec Mixtec",
    "Asaro'o",
    "Southern Binukidnon",
    "Tidaá Mixtec",
    "Nabi",
    "Mundang",
    "Mubi",
    "Ajumbu",
    "Mednyj Aleut",
    "Media Lengua",
    "Musgu",
    "Mündü",
    "Musi",
    "Mabire",
    "Mugom",
    "Multiple languages",
    "Maiwala",
    "Nyong",
    "Malvi",
    "Eastern Xiangxi Miao",
    "Murle",
    "Creek",
    "Western Muria",
    "Yaaku",
    "Muthuvan",
    "Bo-Ung",
    "Muyang",
    "Mursi",
    "Manam",
    "Mattole",
    "Mamboru",
    "Marwari",
    "Peripheral Mongolian",
    "Yucuañe Mixtec",
    "Mulgi",
    "Miyako",
    "Mekmek",
    "Mbara",
    "Minaveha",
    "Marovo",
    "Duri",
    "Moere",
    "Marau",
    "Massep",
    "Mpotovoro",
    "Marfa",
    "Tagal Murut",
    "Machinga",
    "Meoswar",
    "Indus Kohistani",
    "Mesqan",
    "Mwatebu",
    "Juwal",
    "Are",
    "Mwera",
    "Murrinh-Patha",
    "Aiklep",
    "Mouk-Aria",
    "Labo",
    "Kita Maninkakan",
    "Mirandese",
    "Sar",
    "Nyamwanga",
    "Central Maewo",
    "Kala Lagaw Ya",
    "Mün Chin",
    "Marwari",
    "Mwimbi-Muthambi",
    "Moken",
    "Mittu",
    "Mentawai",
    "Hmong Daw",
    "Moingi",
    "Northwest Oaxaca Mixtec",
    "Tezoatlán Mixtec",
    "Manyika",
    "Modang",
    "Mele-Fila",
    "Malgbe",
    "Mbangala",
    "Mvuba",
    "Mozarabic",
    "Miju-Mishmi",
    "Monumbo",
    "Maxi Gbe",
    "Meramera",
    "Moi",
    "Mbowe",
    "Tlahuitoltepec Mixe",
    "Juquila Mixe",
    "Murik",
    "Huitepec Mixtec",
    "Jamiltepec Mixtec",
    "Mada",
    "Metlatónoc Mixtec",
    "Namo",
    "Mahou",
    "Southeastern Nochixtlán Mixtec",
    "Central Masela",
    "Burmese",
    "Mbay",
    "Mayeka",
    "Myene",
    "Bambassi",
    "Manta",
    "Makah",
    "Mangayat",
    "Mamara Senoufo",
    "Moma",
    "Me'en",
    "Anfillo",
    "Pirahã",
    "Muniche",
    "Mesmes",
    "Mundurukú",
    "Erzya",
    "Muyuw",
    "Masaaba",
    "Macuna",
    "Classical Mandaic",
    "Santa María Zacatepec Mixtec",
    "Tumzabt",
    "Madagascar Sign Language",
    "Malimba",
    "Morawa",
    "Monastic Sign Language",
    "Wichí Lhamtés Güisnay",
    "Ixcatlán Mazatec",
    "Manya",
    "Nigeria Mambila",
    "Mazatlán Mixe",
    "Mumuye",
    "Mazanderani",
    "Matipuhy",
    "Movima",
    "Mori Atas",
    "Marúbo",
    "Macanese",
    "Mintil",
    "Inapang",
    "Manza",
    "Deg",
    "Mawayana",
    "Mozambican Sign Language",
    "Maiadomu",
    "Namla",
    "Southern Nambikuára",
    "Narak",
    "Naka'ela",
    "Nabak",
    "Naga Pidgin",
    "Nalu",
    "Nakanai",
    "Nalik",
    "Ngan'gityemerri",
    "Min Nan Chinese",
    "Naaba",
    "Neapolitan",
    "Khoekhoe",
    "Iguta",
    "Naasioi",
    "Ca̱hungwa̱rya̱",
    "Nauru",
    "Navajo",
    "Nawuri",
    "Nakwi",
    "Ngarrindjeri",
    "Coatepec Nahuatl",
    "Nyemba",
    "Ndoe",
    "Chang Naga",
    "Ngbinda",
    "Konyak Naga",
    "Nagarchal",
    "Ngamo",
    "Mao Naga",
    "Ngarinyman",
    "Nake",
    "South Ndebele",
    "Ngbaka Ma'bo",
    "Kuri",
    "Nkukoli",
    "Nnam",
    "Nggem",
    "Numana",
    "Namibian Sign Language",
    "Na",
    "Rongmei Naga",
    "Ngamambo",
    "Southern Ngbandi",
    "Ningera",
    "Iyo",
    "Central Nicobarese",
    "Ponam",
    "Nachering",
    "Yale",
    "Notsi",
    "Nisga'a",
    "Central Huasteca Nahuatl",
    "Classical Nahuatl",
    "Northern Puebla Nahuatl",
    "Na-kara",
    "Michoacán Nahuatl",
    "Nambo",
    "Nauna",
    "Sibe",
    "Northern Katang",
    "Ncane",
    "Nicaraguan Sign Language",
    "Chothe Naga",
    "Chumburung",
    "Central Puebla Nahuatl",
    "Natchez",
    "Ndasa",
    "Kenswei Nsei",
    "Ndau",
    "Nde-Nsele-Nta",
    "North Ndebele",
    "Nadruvian",
    "Ndengereko",
    "Ndali",
    "Samba Leko",
    "Ndamba",
    "Ndaka",
    "Ndolo",
    "Ndam",
    "Ngundi",
    "Ndonga",
    "Ndo",
    "Ndombe",
    "Ndoola",
    "Low German",
    "Ndunga",
    "Dugun",
    "Ndut",
    "Ndobo",
    "Nduga",
    "Lutos",
    "Ndogo",
    "Eastern Ngad'a",
    "Toura",
    "Nedebang",
    "Nde-Gbite",
    "Nêlêmwa-Nixumwak",
    "Nefamese",
    "Negidal",
    "Nyenkha",
    "Neo-Hittite",
    "Neko",
    "Neku",
    "Nemi",
    "Nengone",
    "Ná-Meo",
    "Nepali",
    "North Central Mixe",
    "Yahadian",
    "Bhoti Kinnauri",
    "Nete",
    "Neo",
    "Nyaheun",
    "Newari",
    "Neme",
    "Neyo",
    "Nez Perce",
    "Dhao",
    "Ahwai",
    "Ayiwo",
    "Nafaanra",
    "Mfumte",
    "Ngbaka",
    "Northern Ngbandi",
    "Ngombe",
    "Ngando",
    "Ngemba",
    "Ngbaka Manza",
    "Nǁng",
    "Ngizim",
    "Ngie",
    "Dalabon",
    "Lomwe",
    "Ngatik Men's Creole",
    "Ngwo",
    "Ngulu",
    "Ngurimi",
    "Engdewu",
    "Gvoko",
    "Kriang",
    "Guerrero Nahuatl",
    "Nagumi",
    "Ngwaba",
    "Nggwahyi",
    "Tibea",
    "Ngungwel",
    "Nhanda",
    "Beng",
    "Tabasco Nahuatl",
    "Chiripá",
    "Eastern Huasteca Nahuatl",
    "Nhuwala",
    "Tetelcingo Nahuatl",
    "Nahari",
    "Zacatlán-Ahuacatlán-Tepetzintla Nahuatl",
    "Isthmus-Cosoleacaque Nahuatl",
    "Morelos Nahuatl",
    "Central Nahuatl",
    "Takuu",
    "Isthmus-Pajapan Nahuatl",
    "Huaxcaleca Nahuatl",
    "Naro",
    "Ometepec Nahuatl",
    "Noone",
    "Temascaltepec Nahuatl",
    "Western Huasteca Nahuatl",
    "Isthmus-Mecayapan Nahuatl",
    "Northern Oaxaca Nahuatl",
    "Santa María La Alta Nahuatl",
    "Nias",
    "Nakame",
    "Ngandi",
    "Niellim",
    "Nek",
    "Ngalakgan",
    "Nyiha",
    "Nii",
    "Ngaju",
    "Southern Nicobarese",
    "Nila",
    "Nilamba",
    "Ninzo",
    "Nganasan",
    "Nandi",
    "Nimboran",
    "Nimi",
    "Southeastern Kolami",
    "Niuean",
    "Gilyak",
    "Nimo",
    "Hema",
    "Ngiti",
    "Ningil",
    "Nzanyi",
    "Nocte Naga",
    "Ndonde Hamba",
    "Lotha Naga",
    "Gudanji",
    "Njen",
    "Njalgulgule",
    "Angami Naga",
    "Liangmai Naga",
    "Ao Naga",
    "Njerep",
    "Nisa",
    "Ndyuka-Trio Pidgin",
    "Ngadjunmaya",
    "Kunyi",
    "Njyem",
    "Nyishi",
    "Nkoya",
    "Khoibu Naga",
    "Nkongho",
    "Koireng",
    "Duke",
    "Inpui Naga",
    "Nekgini",
    "Khezha Naga",
    "Thangal Naga",
    "Nakai",
    "Nokuku",
    "Namat",
    "Nkangala",
    "Nkonya",
    "Niuatoputapu",
    "Nkami",
    "Nukuoro",
    "North Asmat",
    "Nyika",
    "Bouna Kulango",
    "Nyika",
    "Nkutu",
    "Nkoroo",
    "Nkari",
    "Ngombale",
    "Nalca",
    "Dutch",
    "East Nyala",
    "Gela",
    "Grangali",
    "Nyali",
    "Ninia Yali",
    "Nihali",
    "Mankiyali",
    "Ngul",
    "Lao Naga",
    "Nchumbulu",
    "Orizaba Nahuatl",
    "Walangama",
    "Nahali",
    "Nyamal",
    "Nalögo",
    "Maram Naga",
    "Big Nambas",
    "Ngam",
    "Ndumu",
    "Mzieme Naga",
    "Tangkhul Naga",
    "Kwasio",
    "Monsang Naga",
    "Nyam",
    "Ngombe",
    "Namakura",
    "Ndemli",
    "Manangba",
    "ǃXóõ",
    "Moyon Naga",
    "Nimanbur",
    "Nambya",
    "Nimbari",
    "Letemboi",
    "Namonuito",
    "Northeast Maidu",
    "Ngamini",
    "Nimoa",
    "Nama",
    "Namuyi",
    "Nawdm",
    "Nyangumarta",
    "Nande",
    "Nancere",
    "West Ambae",
    "Ngandyera",
    "Ngaing",
    "Maring Naga",
    "Ngiemboon",
    "North Nuaulu",
    "Nyangatom",
    "Nankina",
    "Northern Rengma Naga",
    "Namia",
    "Ngete",
    "Norwegian Nynorsk",
    "Wancho Naga",
    "Ngindo",
    "Narungga",
    "Nanticoke",
    "Dwang",
    "Nugunu",
    "Southern Nuni",
    "Nyangga",
    "Nda'nda'",
    "Woun Meu",
    "Norwegian Bokmål",
    "Nuk",
    "Northern Thai",
    "Nimadi",
    "Nomane",
    "Nogai",
    "Nomu",
    "Noiri",
    "Nonuya",
    "Nooksack",
    "Nomlaki",
    "Nocamán",
    "Old Norse",
    "Numanggang",
    "Ngongo",
    "Norwegian",
    "Eastern Nisu",
    "Nomatsiguenga",
    "Ewage-Notu",
    "Novial",
    "Nyambo",
    "Noy",
    "Nayi",
    "Nar Phu",
    "Nupbikha",
    "Ponyo-Gongwang Naga",
    "Phom Naga",
    "Nepali",
    "Southeastern Puebla Nahuatl",
    "Mondropolon",
    "Pochuri Naga",
    "Nipsan",
    "Puimei Naga",
    "Noipx",
    "Napu",
    "Southern Nago",
    "Kura Ede Nago",
    "Ngendelengo",
    "Ndom",
    "Nen",
    "N'Ko",
    "Kyan-Karyaw Naga",
    "Nteng",
    "Akyaung Ari Naga",
    "Ngom",
    "Nara",
    "Noric",
    "Southern Rengma Naga",
    "Jèrriais",
    "Narango",
    "Chokri Naga",
    "Ngarla",
    "Ngarluma",
    "Narom",
    "Norn",
    "North Picene",
    "Norra",
    "Northern Kalapuya",
    "Narua",
    "Ngurmbur",
    "Lala",
    "Sangtam Naga",
    "Lower Nossob",
    "Nshi",
    "Southern Nisu",
    "Nsenga",
    "Northwestern Nisu",
    "Ngasa",
    "Ngoshie",
    "Nigerian Sign Language",
    "Naskapi",
    "Norwegian Sign Language",
    "Sumi Naga",
    "Nehan",
    "Pedi",
    "Nepalese Sign Language",
    "Northern Sierra Miwok",
    "Maritime Sign Language",
    "Nali",
    "Tase Naga",
    "Sierra Negra Nahuatl",
    "Southwestern Nisu",
    "Navut",
    "Nsongo",
    "Nasal",
    "Nisenan",
    "Northern Tidung",
    "Nathembo",
    "Ngantangarra",
    "Natioro",
    "Ngaanyatjarra",
    "Ikoma-Nata-Isenye",
    "Nateni",
    "Ntomba",
    "Northern Tepehuan",
    "Delo",
    "Natügu",
    "Nottoway",
    "Tangkhul Naga",
    "Mantsi",
    "Natanzi",
    "Yuanga",
    "Nukuini",
    "Ngala",
    "Ngundu",
    "Nusu",
    "Nungali",
    "Ndunda",
    "Ngumbi",
    "Nyole",
    "Nuu-chah-nulth",
    "Nusa Laut",
    "Niuafo'ou",
    "Anong",
    "Nguôn",
    "Nupe-Nupe-Tako",
    "Nukumanu",
    "Nukuria",
    "Nuer",
    "Nung",
    "Ngbundu",
    "Northern Nuni",
    "Nguluwan",
    "Mehek",
    "Nunggubuyu",
    "Tlamacazapa Nahuatl",
    "Nasarian",
    "Namiae",
    "Nyokon",
    "Nawathinehena",
    "Nyabwa",
    "Classical Newari",
    "Ngwe",
    "Ngayawung",
    "Southwest Tanna",
    "Nyamusa-Molo",
    "Nauo",
    "Nawaru",
    "Ndwewe",
    "Middle Newar",
    "Nottoway-Meherrin",
    "Nauete",
    "Ngando",
    "Nage",
    "Ngad'a",
    "Nindi",
    "Koki Naga",
    "South Nuaulu",
    "Numidian",
    "Ngawun",
    "Ndambomo",
    "Naxi",
    "Ninggerum",
    "Nafri",
    "Nyanja",
    "Nyangbo",
    "Nyanga-li",
    "Nyore",
    "Nyengo",
    "Giryama",
    "Nyindu",
    "Nyikina",
    "Ama",
    "Nyanga",
    "Nyaneka",
    "Nyeu",
    "Nyamwezi",
    "Nyankole",
    "Nyoro",
    "Nyang'i",
    "Nayini",
    "Nyiha",
    "Nyungar",
    "Nyawaygi",
    "Nyungwe",
    "Nyulnyul",
    "Nyaw",
    "Nganyaywana",
    "Nyakyusa-Ngonde",
    "Tigon Mbembe",
    "Njebi",
    "Nzadi",
    "Nzima",
    "Nzakara",
    "Zeme Naga",
    "New Zealand Sign Language",
    "Teke-Nzikou",
    "Nzakambay",
    "Nanga Dama Dogon",
    "Orok",
    "Oroch",
    "Old Aramaic",
    "Old Avar",
    "Obispeño",
    "Southern Bontok",
    "Oblo",
    "Moabite",
    "Obo Manobo",
    "Old Burmese",
    "Old Breton",
    "Obulom",
    "Ocaina",
    "Old Chinese",
    "Occitan",
    "Old Cham",
    "Old Cornish",
    "Atzingo Matlatzinca",
    "Odut",
    "Od",
    "Old Dutch",
    "Odual",
    "Ofo",
    "Old Frisian",
    "Efutop",
    "Ogbia",
    "Ogbah",
    "Old Georgian",
    "Ogbogolo",
    "Khana",
    "Ogbronuagum",
    "Old Hittite",
    "Old Hungarian",
    "Oirata",
    "Okolie",
    "Inebu One",
    "Northwestern Ojibwa",
    "Central Ojibwa",
    "Eastern Ojibwa",
    "Ojibwa",
    "Old Japanese",
    "Severn Ojibwa",
    "Ontong Java",
    "Western Ojibwa",
    "Okanagan",
    "Okobo",
    "Kobo",
    "Okodia",
    "Okpe",
    "Koko Babangk",
    "Koresh-e Rostam",
    "Okiek",
    "Oko-Juwoi",
    "Kwamtim One",
    "Old Kentish Sign Language",
    "Middle Korean",
    "Oki-No-Erabu",
    "Old Korean",
    "Kirike",
    "Oko-Eni-Osayen",
    "Oku",
    "Orokaiva",
    "Okpe",
    "Old Khmer",
    "Walungge",
    "Mochi",
    "Olekha",
    "Olkol",
    "Oloma",
    "Livvi",
    "Olrat",
    "Old Lithuanian",
    "Kuvale",
    "Omaha-Ponca",
    "East Ambae",
    "Mochica",
    "Omagua",
    "Omi",
    "Omok",
    "Ombo",
    "Minoan",
    "Utarmbung",
    "Old Manipuri",
    "Old Marathi",
    "Omotik",
    "Omurano",
    "South Tairora",
    "Old Mon",
    "Old Malay",
    "Ona",
    "Lingao",
    "Oneida",
    "Olo",
    "Onin",
    "Onjob",
    "Kabore One",
    "Onobasulu",
    "Onondaga",
    "Sartang",
    "Northern One",
    "Ono",
    "Ontenu",
    "Unua",
    "Old Nubian",
    "Onin Based Pidgin",
    "Tohono O'odham",
    "Ong",
    "Önge",
    "Oorlams",
    "Old Ossetic",
    "Okpamheri",
    "Kopkaka",
    "Oksapmin",
    "Opao",
    "Opata",
    "Ofayé",
    "Oroha",
    "Orma",
    "Orejón",
    "Oring",
    "Oroqen",
    "Oriya",
    "Oromo",
    "Orang Kanaq",
    "Orokolo",
    "Oruma",
    "Orang Seletar",
    "Adivasi Oriya",
    "Ormuri",
    "Old Russian",
    "Oro Win",
    "Oro",
    "Odia",
    "Ormu",
    "Osage",
    "Oscan",
    "Osing",
    "Old Sundanese",
    "Ososo",
    "Old Spanish",
    "Ossetian",
    "Osatu",
    "Southern One",
    "Old Saxon",
    "Ottoman Turkish",
    "Old Tibetan",
    "Ot Danum",
    "Mezquital Otomi",
    "Oti",
    "Old Turkish",
    "Tilapa Otomi",
    "Eastern Highland Otomi",
    "Tenango Otomi",
    "Querétaro Otomi",
    "Otoro",
    "Estado de México Otomi",
    "Temoaya Otomi",
    "Otuke",
    "Ottawa",
    "Texcatepec Otomi",
    "Old Tamil",
    "Ixtenco Otomi",
    "Tagargrent",
    "Glio-Oubi",
    "Oune",
    "Old Uighur",
    "Ouma",
    "Elfdalian",
    "Owiniga",
    "Old Welsh",
    "Oy",
    "Oyda",
    "Wayampi",
    "Oya'oya",
    "Koonzime",
    "Parecís",
    "Pacoh",
    "Paumarí",
    "Pagibete",
    "Paranawát",
    "Pangasinan",
    "Tenharim",
    "Pe",
    "Parakanã",
    "Pahlavi",
    "Pampanga",
    "Panjabi",
    "Northern Paiute",
    "Papiamento",
    "Parya",
    "Panamint",
    "Papasena",
    "Palauan",
    "Pakaásnovos",
    "Pawnee",
    "Pankararé",
    "Pech",
    "Pankararú",
    "Páez",
    "Patamona",
    "Mezontla Popoloca",
    "Coyotepec Popoloca",
    "Paraujano",
    "E'ñapa Woromaipu",
    "Parkwa",
    "Mak",
    "Puebla Mazatec",
    "Kpasam",
    "Papel",
    "Badyara",
    "Pangwa",
    "Central Pame",
    "Southern Pashto",
    "Northern Pashto",
    "Pnar",
    "Pyu",
    "Santa Inés Ahuatempan Popoloca",
    "Pear",
    "Bouyei",
    "Picard",
    "Ruching Palaung",
    "Paliyan",
    "Paniya",
    "Pardhan",
    "Duruwa",
    "Parenga",
    "Paite Chin",
    "Pardhi",
    "Nigerian Pidgin",
    "Piti",
    "Pacahuara",
    "Pyapun",
    "Anam",
    "Pennsylvania German",
    "Pa Di",
    "Podena",
    "Padoe",
    "Plautdietsch",
    "Kayan",
    "Peranakan Indonesian",
    "Eastern Pomo",
    "Mala",
    "Taje",
    "Northeastern Pomo",
    "Pengo",
    "Bonan",
    "Chichimeca-Jonaz",
    "Northern Pomo",
    "Penchal",
    "Pekal",
    "Phende",
    "Old Persian",
    "Kunja",
    "Southern Pomo",
    "Iranian Persian",
    "Pémono",
    "Petats",
    "Petjo",
    "Eastern Penan",
    "Pááfang",
    "Pere",
    "Pfaelzisch",
    "Sudanese Creole Arabic",
    "Gāndhārī",
    "Pangwali",
    "Pagi",
    "Rerep",
    "Primitive Irish",
    "Paelignian",
    "Pangseng",
    "Pagu",
    "Papua New Guinean Sign Language",
    "Pa-Hng",
    "Phudagi",
    "Phuong",
    "Phukha",
    "Pahari",
    "Phake",
    "Phalura",
    "Phimbi",
    "Phoenician",
    "Phunoi",
    "Phana'",
    "Pahari-Potwari",
    "Phu Thai",
    "Phuan",
    "Pahlavani",
    "Phangduwali",
    "Pima Bajo",
    "Yine",
    "Pinji",
    "Piaroa",
    "Piro",
    "Pingelapese",
    "Pisabo",
    "Pitcairn-Norfolk",
    "Pijao",
    "Yom",
    "Powhatan",
    "Piame",
    "Piapoco",
    "Pero",
    "Piratapuyo",
    "Pijin",
    "Pitta Pitta",
    "Pintupi-Luritja",
    "Pileni",
    "Pimbwe",
    "Piu",
    "Piya-Kwonci",
    "Pije",
    "Pitjantjatjara",
    "Ardhamāgadhī Prākrit",
    "Pokomo",
    "Paekche",
    "Pak-Tong",
    "Pankhu",
    "Pakanha",
    "Pökoot",
    "Pukapuka",
    "Attapady Kurumba",
    "Pakistan Sign Language",
    "Maleng",
    "Paku",
    "Miani",
    "Polonombauk",
    "Central Palawano",
    "Polari",
    "Palu'e",
    "Pilagá",
    "Paulohi",
    "Pali",
    "Polci",
    "Kohistani Shina",
    "Shwe Palaung",
    "Palenquero",
    "Oluta Popoluca",
    "Palaic",
    "Palaka Senoufo",
    "San Marcos Tlacoyalco Popoloca",
    "Plateau Malagasy",
    "Palikúr",
    "Southwest Palawano",
    "Brooke's Point Palawano",
    "Bolyu",
    "Paluan",
    "Paama",
    "Pambia",
    "Pallanganmiddang",
    "Pwaamei",
    "Pamona",
    "Māhārāṣṭri Prākrit",
    "Northern Pumi",
    "Southern Pumi",
    "Pamlico",
    "Lingua Franca",
    "Pomo",
    "Pam",
    "Pom",
    "Northern Pame",
    "Paynamar",
    "Piemontese",
    "Tuamotuan",
    "Plains Miwok",
    "Poumei Naga",
    "Papuan Malay",
    "Southern Pame",
    "Punan Bah-Biau",
    "Western Panjabi",
    "Pannei",
    "Mpinda",
    "Western Penan",
    "Pangu",
    "Penrhyn",
    "Aoheng",
    "Pinjarup",
    "Paunaka",
    "Paleni",
    "Punan Batu 1",
    "Pinai-Hagahai",
    "Panobo",
    "Pancana",
    "Pana",
    "Panim",
    "Ponosakan",
    "Pontic",
    "Jiongnai Bunu",
    "Pinigura",
    "Banyjima",
    "Phong-Kniang",
    "Pinyin",
    "Pana",
    "Poqomam",
    "San Juan Atzingo Popoloca",
    "Poke",
    "Potiguára",
    "Poqomchi'",
    "Highland Popoluca",
    "Pokangá",
    "Polish",
    "Southeastern Pomo",
    "Pohnpeian",
    "Central Pomo",
    "Pwapwâ",
    "Texistepec Popoluca",
    "Portuguese",
    "Sayula Popoluca",
    "Potawatomi",
    "Upper Guinea Crioulo",
    "San Felipe Otlaltepec Popoloca",
    "Polabian",
    "Pogolo",
    "Papi",
    "Paipai",
    "Uma",
    "Pipil",
    "Papuma",
    "Papapana",
    "Folopa",
    "Pelende",
    "Pei",
    "San Luís Temalacayuca Popoloca",
    "Pare",
    "Papora",
    "Pa'a",
    "Malecite-Passamaquoddy",
    "Parachi",
    "Parsi-Dari",
    "Principense",
    "Paranan",
    "Prussian",
    "Porohanon",
    "Paicî",
    "Parauk",
    "Peruvian Sign Language",
    "Kibiri",
    "Prasuni",
    "Old Provençal",
    "Parsi",
    "Ashéninka Perené",
    "Puri",
    "Dari",
    "Phai",
    "Puragi",
    "Parawen",
    "Purik",
    "Providencia Sign Language",
    "Asue Awyu",
    "Iranian Sign Language",
    "Plains Indian Sign Language",
    "Central Malay",
    "Penang Sign Language",
    "Southwest Pashai",
    "Southeast Pashai",
    "Puerto Rican Sign Language",
    "Pauserna",
    "Panasuan",
    "Polish Sign Language",
    "Philippine Sign Language",
    "Pasi",
    "Portuguese Sign Language",
    "Kaulong",
    "Central Pashto",
    "Sauraseni Prākrit",
    "Port Sandwich",
    "Piscataway",
    "Pai Tavytera",
    "Pataxó Hã-Ha-Hãe",
    "Pindiini",
    "Patani",
    "Zo'é",
    "Patep",
    "Pattapu",
    "Piamatsina",
    "Enrekang",
    "Bambam",
    "Port Vato",
    "Pentlatch",
    "Pathiya",
    "Western Highland Purepecha",
    "Purum",
    "Punan Merap",
    "Punan Aput",
    "Puelche",
    "Punan Merah",
    "Phuie",
    "Puinave",
    "Punan Tubu",
    "Puma",
    "Puoc",
    "Pulabu",
    "Puquina",
    "Puruborá",
    "Pushto",
    "Putoh",
    "Punu",
    "Puluwatese",
    "Puare",
    "Purisimeño",
    "Pawaia",
    "Panawa",
    "Gapapaiwa",
    "Patwin",
    "Molbog",
    "Paiwan",
    "Pwo Western Karen",
    "Powari",
    "Pwo Northern Karen",
    "Quetzaltepec Mixe",
    "Pye Krumen",
    "Fyam",
    "Poyanáwa",
    "Paraguayan Sign Language",
    "Puyuma",
    "Pyu",
    "Pyen",
    "Pazeh",
    "Jejara Naga",
    "Quapaw",
    "Huallaga Huánuco Quechua",
    "K'iche'",
    "Calderón Highland Quichua",
    "Quechua",
    "Lambayeque Quechua",
    "Chimborazo Highland Quichua",
    "South Bolivian Quechua",
    "Quileute",
    "Chachapoyas Quechua",
    "North Bolivian Quechua",
    "Sipacapense",
    "Quinault",
    "Southern Pastaza Quechua",
    "Quinqui",
    "Yanahuanca Pasco Quechua",
    "Santiago del Estero Quichua",
    "Sacapulteco",
    "Tena Lowland Quichua",
    "Yauyos Quechua",
    "Ayacucho Quechua",
    "Cusco Quechua",
    "Ambo-Pasco Quechua",
    "Cajamarca Quechua",
    "Eastern Apurímac Quechua",
    "Huamalíes-Dos de Mayo Huánuco Quechua",
    "Imbabura Highland Quichua",
    "Loja Highland Quichua",
    "Cajatambo North Lima Quechua",
    "Margos-Yarowilca-Lauricocha Quechua",
    "North Junín Quechua",
    "Napo Lowland Quechua",
    "Pacaraos Quechua",
    "San Martín Quechua",
    "Huaylla Wanca Quechua",
    "Queyu",
    "Northern Pastaza Quichua",
    "Corongo Ancash Quechua",
    "Classical Quechua",
    "Huaylas Ancash Quechua",
    "Kuman",
    "Sihuas Ancash Quechua",
    "Kwalhioqua-Tlatskanai",
    "Chiquián Ancash Quechua",
    "Chincha Quechua",
    "Panao Huánuco Quechua",
    "Salasaca Highland Quichua",
    "Northern Conchucos Ancash Quechua",
    "Southern Conchucos Ancash Quechua",
    "Puno Quechua",
    "Qashqa'i",
    "Cañar Highland Quichua",
    "Southern Qiang",
    "Santa Ana de Tusi Pasco Quechua",
    "Arequipa-La Unión Quechua",
    "Jauja Wanca Quechua",
    "Quenya",
    "Quiripi",
    "Dungmali",
    "Camling",
    "Rasawa",
    "Rade",
    "Western Meohang",
    "Logooli",
    "Rabha",
    "Ramoaaina",
    "Rajasthani",
    "Tulu-Bohuai",
    "Ralte",
    "Canela",
    "Riantana",
    "Rao",
    "Rapanui",
    "Saam",
    "Rarotongan",
    "Tegali",
    "Razajerdi",
    "Raute",
    "Sampang",
    "Rawang",
    "Rang",
    "Rapa",
    "Rahambuu",
    "Rumai Palaung",
    "Northern Bontok",
    "Miraya Bikol",
    "Barababaraba",
    "Réunion Creole French",
    "Rudbari",
    "Rerau",
    "Rembong",
    "Rejang Kayan",
    "Kara",
    "Reli",
    "Rejang",
    "Rendille",
    "Remo",
    "Rengao",
    "Rer Bare",
    "Reshe",
    "Retta",
    "Reyesano",
    "Roria",
    "Romano-Greek",
    "Rangkas",
    "Romagnol",
    "Resígaro",
    "Southern Roglai",
    "Ringgou",
    "Rohingya",
    "Yahang",
    "Riang",
    "Bribri Sign Language",
    "Tarifit",
    "Riang Lang",
    "Nyaturu",
    "Nungu",
    "Ribun",
    "Ritharrngu",
    "Riung",
    "Rajong",
    "Raji",
    "Rajbanshi",
    "Kraol",
    "Rikbaktsa",
    "Rakahanga-Manihiki",
    "Rakhine",
    "Marka",
    "Rangpuri",
    "Arakwal",
    "Rama",
    "Rembarrnga",
    "Carpathian Romani",
    "Traveller Danish",
    "Angloromani",
    "Kalo Finnish Romani",
    "Traveller Norwegian",
    "Murkim",
    "Lomavren",
    "Romkun",
    "Baltic Romani",
    "Roma",
    "Balkan Romani",
    "Sinte Romani",
    "Rempi",
    "Caló",
    "Romanian Sign Language",
    "Domari",
    "Tavringer Romani",
    "Romanova",
    "Welsh Romani",
    "Romam",
    "Vlax Romani",
    "Marma",
    "Brunca Sign Language",
    "Ruund",
    "Ronga",
    "Ranglong",
    "Roon",
    "Rongpo",
    "Nari Nari",
    "Rungwa",
    "Tae'",
    "Cacgia Roglai",
    "Rogo",
    "Ronji",
    "Rombo",
    "Northern Roglai",
    "Romansh",
    "Romblomanon",
    "Romany",
    "Romanian",
    "Rotokas",
    "Kriol",
    "Rongga",
    "Runga",
    "Dela-Oenale",
    "Repanbitip",
    "Rapting",
    "Ririo",
    "Waima",
    "Arritinngithigh",
    "Romano-Serbian",
    "Ruthenian",
    "Russian Sign Language",
    "Miriwoong Sign Language",
    "Rwandan Sign Language",
    "Rungtu Chin",
    "Ratahan",
    "Rotuman",
    "Yurats",
    "Rathawi",
    "Gungu",
    "Ruuli",
    "Rusyn",
    "Luguru",
    "Roviana",
    "Ruga",
    "Rufiji",
    "Che",
    "Rundi",
    "Istro Romanian",
    "Macedo-Romanian",
    "Megleno Romanian",
    "Russian",
    "Rutul",
    "Lanas Lobu",
    "Mala",
    "Ruma",
    "Rawo",
    "Rwa",
    "Ruwila",
    "Amba",
    "Rawa",
    "Marwari",
    "Ngardi",
    "Karuwali",
    "Northern Amami-Oshima",
    "Yaeyama",
    "Central Okinawan",
    "Rāziḥī",
    "Saba",
    "Buglere",
    "Meskwaki",
    "Sandawe",
    "Sabanê",
    "Safaliba",
    "Sango",
    "Yakut",
    "Sahu",
    "Sake",
    "Samaritan Aramaic",
    "Sanskrit",
    "Sause",
    "Samburu",
    "Saraveca",
    "Sasak",
    "Santali",
    "Saleman",
    "Saafi-Saafi",
    "Sawi",
    "Sa",
    "Saya",
    "Saurashtra",
    "Ngambay",
    "Simbo",
    "Kele",
    "Southern Samo",
    "Saliba",
    "Chabu",
    "Seget",
    "Sori-Harengan",
    "Seti",
    "Surbakhal",
    "Safwa",
    "Botolan Sambal",
    "Sagala",
    "Sindhi Bhil",
    "Sabüm",
    "Sangu",
    "Sileibi",
    "Sembakung Murut",
    "Subiya",
    "Kimki",
    "Stod Bhoti",
    "Sabine",
    "Simba",
    "Seberuang",
    "Soli",
    "Sara Kaba",
    "Chut",
    "Dongxiang",
    "San Miguel Creole French",
    "Sanggau",
    "Sakachep",
    "Sri Lankan Creole Malay",
    "Sadri",
    "Shina",
    "Sicilian",
    "Scots",
    "Hyolmo",
    "Sa'och",
    "North Slavey",
    "Southern Katang",
    "Shumcho",
    "Sheni",
    "Sha",
    "Sicel",
    "Toraja-Sa'dan",
    "Shabak",
    "Sassarese Sardinian",
    "Surubu",
    "Sarli",
    "Savi",
    "Southern Kurdish",
    "Suundi",
    "Sos Kundi",
    "Saudi Arabian Sign Language",
    "Gallurese Sardinian",
    "Bukar-Sadung Bidayuh",
    "Sherdukpen",
    "Semandang",
    "Oraon Sadri",
    "Sened",
    "Shuadit",
    "Sarudu",
    "Sibu Melanau",
    "Sallands",
    "Semai",
    "Shempire Senoufo",
    "Sechelt",
    "Sedang",
    "Seneca",
    "Cebaara Senoufo",
    "Segeju",
    "Sena",
    "Seri",
    "Sene",
    "Sekani",
    "Selkup",
    "Nanerigé Sénoufo",
    "Suarmin",
    "Sìcìté Sénoufo",
    "Senara Sénoufo",
    "Serrano",
    "Koyraboro Senni Songhai",
    "Sentani",
    "Serui-Laut",
    "Nyarafolo Senoufo",
    "Sewa Bay",
    "Secoya",
    "Senthang Chin",
    "Langue des signes de Belgique Francophone",
    "Eastern Subanen",
    "Small Flowery Miao",
    "South African Sign Language",
    "Sehwi",
    "Old Irish",
    "Mag-antsi Ayta",
    "Kipsigis",
    "Surigaonon",
    "Segai",
    "Swiss-German Sign Language",
    "Shughni",
    "Suga",
    "Surgujia",
    "Sangkong",
    "Singa",
    "Singpho",
    "Sangisari",
    "Samogitian",
    "Brokpake",
    "Salas",
    "Sebat Bet Gurage",
    "Sierra Leone Sign Language",
    "Sanglechi",
    "Sursurunga",
    "Shall-Zwall",
    "Ninam",
    "Sonde",
    "Kundal Shahi",
    "Sheko",
    "Shua",
    "Shoshoni",
    "Tachelhit",
    "Shatt",
    "Shilluk",
    "Shendu",
    "Shahrudi",
    "Shan",
    "Shanga",
    "Shipibo-Conibo",
    "Sala",
    "Shi",
    "Shuswap",
    "Shasta",
    "Chadian Arabic",
    "Shehri",
    "Shwai",
    "She",
    "Tachawit",
    "Syenara Senoufo",
    "Akkala Sami",
    "Sebop",
    "Sidamo",
    "Simaa",
    "Siamou",
    "Paasaal",
    "Zire",
    "Shom Peng",
    "Numbami",
    "Sikiana",
    "Tumulung Sisaala",
    "Mende",
    "Sinhala",
    "Sikkimese",
    "Sonia",
    "Siri",
    "Siuslaw",
    "Sinagen",
    "Sumariup",
    "Siwai",
    "Sumau",
    "Sivandi",
    "Siwi",
    "Epena",
    "Sajau Basap",
    "Kildin Sami",
    "Pite Sami",
    "Assangori",
    "Kemi Sami",
    "Sajalong",
    "Mapun",
    "Sindarin",
    "Xibe",
    "Surjapuri",
    "Siar-Lak",
    "Senhaja De Srair",
    "Ter Sami",
    "Ume Sami",
    "Shawnee",
    "Skagit",
    "Saek",
    "Ma Manda",
    "Southern Sierra Miwok",
    "Seke",
    "Sakirabiá",
    "Sakalava Malagasy",
    "Sikule",
    "Sika",
    "Seke",
    "Kutong",
    "Kolibugan Subanon",
    "Seko Tengah",
    "Sekapan",
    "Sininkere",
    "Saraiki",
    "Maia",
    "Sakata",
    "Sakao",
    "Skou",
    "Skepi Creole Dutch",
    "Seko Padang",
    "Sikaiana",
    "Sekar",
    "Sáliba",
    "Sissala",
    "Sholaga",
    "Swiss-Italian Sign Language",
    "Selungai Murut",
    "Southern Puget Sound Salish",
    "Lower Silesian",
    "Salumá",
    "Slovak",
    "Salt-Yui",
    "Pangutaran Sama",
    "Salinan",
    "Lamaholot",
    "Salchuq",
    "Salar",
    "Singapore Sign Language",
    "Sila",
    "Selaru",
    "Slovenian",
    "Sialum",
    "Salampasu",
    "Selayar",
    "Ma'ya",
    "Southern Sami",
    "Simbari",
    "Som",
    "Northern Sami",
    "Auwe",
    "Simbali",
    "Samei",
    "Lule Sami",
    "Bolinao",
    "Central Sama",
    "Musasa",
    "Inari Sami",
    "Samoan",
    "Samaritan",
    "Samo",
    "Simeulue",
    "Skolt Sami",
    "Simte",
    "Somray",
    "Samvedi",
    "Sumbawa",
    "Samba",
    "Semnani",
    "Simeku",
    "Shona",
    "Sinaugoro",
    "Sindhi",
    "Bau Bidayuh",
    "Noon",
    "Sanga",
    "Sensi",
    "Riverain Sango",
    "Soninke",
    "Sangil",
    "Southern Ma'di",
    "Siona",
    "Snohomish",
    "Siane",
    "Sangu",
    "Sihan",
    "South West Bay",
    "Senggi",
    "Sa'ban",
    "Selee",
    "Sam",
    "Saniyo-Hiyewe",
    "Kou",
    "Thai Song",
    "Sobei",
    "So",
    "Songoora",
    "Songomeno",
    "Sogdian",
    "Aka",
    "Sonha",
    "Soi",
    "Sokoro",
    "Solos",
    "Somali",
    "Songo",
    "Songe",
    "Kanasi",
    "Somrai",
    "Seeku",
    "Southern Sotho",
    "Southern Thai",
    "Sonsorol",
    "Sowanda",
    "Swo",
    "Miyobe",
    "Temi",
    "Spanish",
    "Sepa",
    "Sapé",
    "Saep",
    "Sepa",
    "Sian",
    "Saponi",
    "Sengo",
    "Selepet",
    "Akukem",
    "Sanapaná",
    "Spokane",
    "Supyire Senoufo",
    "Loreto-Ucayali Spanish",
    "Saparua",
    "Saposa",
    "Spiti Bhoti",
    "Sapuan",
    "Sambalpuri",
    "South Picene",
    "Sabaot",
    "Shama-Sambuga",
    "Shau",
    "Albanian",
    "Albanian Sign Language",
    "Suma",
    "Susquehannock",
    "Sorkhei",
    "Sou",
    "Siculo Arabic",
    "Sri Lankan Sign Language",
    "Soqotri",
    "Squamish",
    "Kufr Qassem Sign Language",
    "Saruga",
    "Sora",
    "Logudorese Sardinian",
    "Sardinian",
    "Sara",
    "Nafi",
    "Sulod",
    "Sarikoli",
    "Siriano",
    "Serudung Murut",
    "Isirawa",
    "Saramaccan",
    "Sranan Tongo",
    "Campidanese Sardinian",
    "Serbian",
    "Sirionó",
    "Serer",
    "Sarsi",
    "Sauri",
    "Suruí",
    "Southern Sorsoganon",
    "Serua",
    "Sirmauri",
    "Sera",
    "Shahmirzadi",
    "Southern Sama",
    "Suba-Simbiti",
    "Siroi",
    "Balangingi",
    "Thao",
    "Seimat",
    "Shihhi Arabic",
    "Sansi",
    "Sausi",
    "Sunam",
    "Western Sisaala",
    "Semnam",
    "Waata",
    "Sissano",
    "Spanish Sign Language",
    "So'a",
    "Swiss-French Sign Language",
    "Sô",
    "Sinasina",
    "Susuami",
    "Shark Bay",
    "Swati",
    "Samberigi",
    "Saho",
    "Sengseng",
    "Settla",
    "Northern Subanen",
    "Sentinel",
    "Liana-Seti",
    "Seta",
    "Trieng",
    "Shelta",
    "Bulo Stieng",
    "Matya Samo",
    "Arammba",
    "Stellingwerfs",
    "Setaman",
    "Owa",
    "Stoney",
    "Southeastern Tepehuan",
    "Saterfriesisch",
    "Straits Salish",
    "Shumashti",
    "Budeh Stieng",
    "Samtao",
    "Silt'e",
    "Satawalese",
    "Siberian Tatar",
    "Sulka",
    "Suku",
    "Western Subanon",
    "Suena",
    "Suganga",
    "Suki",
    "Shubi",
    "Sukuma",
    "Sundanese",
    "Bouni",
    "Tirmaga-Chai Suri",
    "Mwaghavul",
    "Susu",
    "Subtiaba",
    "Puroik",
    "Sumbwa",
    "Sumerian",
    "Suyá",
    "Sunwar",
    "Svan",
    "Ulau-Suain",
    "Vincentian Creole English",
    "Serili",
    "Slovakian Sign Language",
    "Slavomolisano",
    "Savosavo",
    "Skalvian",
    "Swahili",
    "Maore Comorian",
    "Congo Swahili",
    "Swedish",
    "Sere",
    "Swabian",
    "Swahili",
    "Sui",
    "Sira",
    "Malawi Sena",
    "Swedish Sign Language",
    "Samosa",
    "Sawknah",
    "Shanenawa",
    "Suau",
    "Sharwa",
    "Saweru",
    "Seluwasan",
    "Sawila",
    "Suwawa",
    "Shekhawati",
    "Sowa",
    "Suruahá",
    "Sarua",
    "Suba",
    "Sicanian",
    "Sighu",
    "Shuhi",
    "Southern Kalapuya",
    "Selian",
    "Samre",
    "Sangir",
    "Sorothaptic",
    "Saaroa",
    "Sasaru",
    "Upper Saxon",
    "Saxwe Gbe",
    "Siang",
    "Central Subanen",
    "Classical Syriac",
    "Seki",
    "Sukur",
    "Sylheti",
    "Maya Samo",
    "Senaya",
    "Suoy",
    "Syriac",
    "Sinyar",
    "Kagate",
    "Samay",
    "Al-Sayyid Bedouin Sign Language",
    "Semelai",
    "Ngalum",
    "Semaq Beri",
    "Seru",
    "Seze",
    "Sengele",
    "Silesian",
    "Sula",
    "Suabo",
    "Solomon Islands Sign Language",
    "Isu",
    "Sawai",
    "Sakizaya",
    "Lower Tanana",
    "Tabassaran",
    "Lowland Tarahumara",
    "Tause",
    "Tariana",
    "Tapirapé",
    "Tagoi",
    "Tahitian",
    "Eastern Tamang",
    "Tala",
    "Tal",
    "Tamil",
    "Tangale",
    "Yami",
    "Taabwa",
    "Tamasheq",
    "Central Tarahumara",
    "Tay Boi",
    "Tatar",
    "Upper Tanana",
    "Tatuyo",
    "Tai",
    "Tamki",
    "Atayal",
    "Tocho",
    "Aikanã",
    "Takia",
    "Kaki Ae",
    "Tanimbili",
    "Mandara",
    "North Tairora",
    "Dharawal",
    "Gaam",
    "Tiang",
    "Calamian Tagbanwa",
    "Tboli",
    "Tagbu",
    "Barro Negro Tunebo",
    "Tawala",
    "Taworta",
    "Tumtum",
    "Tanguat",
    "Tembo",
    "Tubar",
    "Tobo",
    "Tagbanwa",
    "Kapin",
    "Tabaru",
    "Ditammari",
    "Ticuna",
    "Tanacross",
    "Datooga",
    "Tafi",
    "Southern Tutchone",
    "Malinaltepec Me'phaa",
    "Tamagario",
    "Turks And Caicos Creole English",
    "Wára",
    "Tchitchege",
    "Taman",
    "Tanahmerah",
    "Tichurong",
    "Taungyo",
    "Tawr Chin",
    "Kaiy",
    "Torres Strait Creole",
    "T'en",
    "Southeastern Tarahumara",
    "Tecpatlán Totonac",
    "Toda",
    "Tulu",
    "Thado Chin",
    "Tagdal",
    "Panchpargania",
    "Emberá-Tadó",
    "Tai Nüa",
    "Tiranige Diga Dogon",
    "Talieng",
    "Western Tamang",
    "Thulung",
    "Tomadino",
    "Tajio",
    "Tambas",
    "Sur",
    "Taruma",
    "Tondano",
    "Teme",
    "Tita",
    "Todrah",
    "Doutai",
    "Tetun Dili",
    "Toro",
    "Tandroy-Mahafaly Malagasy",
    "Tadyawan",
    "Temiar",
    "Tetete",
    "Terik",
    "Tepo Krumen",
    "Huehuetla Tepehua",
    "Teressa",
    "Teke-Tege",
    "Tehuelche",
    "Torricelli",
    "Ibali Teke",
    "Telugu",
    "Timne",
    "Tama",
    "Teso",
    "Tepecano",
    "Temein",
    "Tereno",
    "Tengger",
    "Tetum",
    "Soo",
    "Teor",
    "Tewa",
    "Tennet",
    "Tulishi",
    "Tetserret",
    "Tofin Gbe",
    "Tanaina",
    "Tefaro",
    "Teribe",
    "Ternate",
    "Sagalla",
    "Tobilung",
    "Tigak",
    "Ciwogai",
    "Eastern Gorkha Tamang",
    "Chalikha",
    "Tobagonian Creole English",
    "Lawunuia",
    "Tagin",
    "Tajik",
    "Tagalog",
    "Tandaganon",
    "Sudest",
    "Tangoa",
    "Tring",
    "Tareng",
    "Nume",
    "Central Tagbanwa",
    "Tanggu",
    "Tingui-Boto",
    "Tagwana Senoufo",
    "Tagish",
    "Togoyo",
    "Tagalaka",
    "Thai",
    "Kuuk Thaayorre",
    "Chitwania Tharu",
    "Thangmi",
    "Northern Tarahumara",
    "Tai Long",
    "Tharaka",
    "Dangaura Tharu",
    "Aheu",
    "Thachanadan",
    "Thompson",
    "Kochila Tharu",
    "Rana Tharu",
    "Thakali",
    "Tahltan",
    "Thuri",
    "Tahaggart Tamahaq",
    "Tha",
    "Tayart Tamajeq",
    "Tidikelt Tamazight",
    "Tira",
    "Tifal",
    "Tigre",
    "Timugon Murut",
    "Tiene",
    "Tilung",
    "Tikar",
    "Tillamook",
    "Timbe",
    "Tindi",
    "Teop",
    "Trimuris",
    "Tiéfo",
    "Tigrinya",
    "Masadiit Itneg",
    "Tinigua",
    "Adasen",
    "Tiv",
    "Tiwi",
    "Southern Tiwa",
    "Tiruray",
    "Tai Hongjin",
    "Tajuasohn",
    "Tunjung",
    "Northern Tujia",
    "Tjungundji",
    "Tai Laing",
    "Timucua",
    "Tonjon",
    "Temacine Tamazight",
    "Tjupany",
    "Southern Tujia",
    "Tjurruru",
    "Djabwurrung",
    "Truká",
    "Buksa",
    "Tukudede",
    "Takwane",
    "Tukumanféd",
    "Tesaka Malagasy",
    "Tokelau",
    "Takelma",
    "Toku-No-Shima",
    "Tikopia",
    "Tee",
    "Tsakhur",
    "Takestani",
    "Kathoriya Tharu",
    "Upper Necaxa Totonac",
    "Mur Pano",
    "Teanu",
    "Tangko",
    "Takua",
    "Southwestern Tepehuan",
    "Tobelo",
    "Yecuatla Totonac",
    "Talaud",
    "Telefol",
    "Tofanma",
    "Klingon",
    "Tlingit",
    "Talinga-Bwisi",
    "Taloki",
    "Tetela",
    "Tolomako",
    "Talondo'",
    "Talodi",
    "Filomena Mata-Coahuitlán Totonac",
    "Tai Loi",
    "Talise",
    "Tambotalo",
    "Sou Nama",
    "Tulehu",
    "Taliabu",
    "Khehek",
    "Talysh",
    "Tama",
    "Katbol",
    "Tumak",
    "Haruai",
    "Tremembé",
    "Toba-Maskoy",
    "Ternateño",
    "Tamashek",
    "Tutuba",
    "Samarokena",
    "Northwestern Tamang",
    "Tamnim Citak",
    "Tai Thanh",
    "Taman",
    "Temoq",
    "Tumleo",
    "Jewish Babylonian Aramaic",
    "Tima",
    "Tasmate",
    "Iau",
    "Tembo",
    "Temuan",
    "Tami",
    "Tamanaku",
    "Tacana",
    "Western Tunebo",
    "Tanimuca-Retuarã",
    "Angosturas Tunebo",
    "Tobanga",
    "Maiani",
    "Tandia",
    "Kwamera",
    "Lenakel",
    "Tabla",
    "North Tanna",
    "Toromono",
    "Whitesands",
    "Taino",
    "Ménik",
    "Tenis",
    "Tontemboan",
    "Tay Khang",
    "Tangchangya",
    "Tonsawang",
    "Tanema",
    "Tongwe",
    "Ten'edn",
    "Toba",
    "Coyutla Totonac",
    "Toma",
    "Gizrra",
    "Tonga",
    "Gitonga",
    "Tonga",
    "Tojolabal",
    "Toki Pona",
    "Tolowa",
    "Tombulu",
    "Tonga",
    "Xicotepec De Juárez Totonac",
    "Papantla Totonac",
    "Toposa",
    "Togbo-Vara Banda",
    "Highland Totonac",
    "Tho",
    "Upper Taromi",
    "Jemez",
    "Tobian",
    "Topoiyo",
    "To",
    "Taupota",
    "Azoyú Me'phaa",
    "Tippera",
    "Tarpia",
    "Kula",
    "Tok Pisin",
    "Tapieté",
    "Tupinikin",
    "Tlacoapa Me'phaa",
    "Tampulma",
    "Tupinambá",
    "Tai Pao",
    "Pisaflores Tepehua",
    "Tukpa",
    "Tuparí",
    "Tlachichilco Tepehua",
    "Tampuan",
    "Tanapag",
    "Tupí",
    "Acatepec Me'phaa",
    "Trumai",
    "Tinputz",
    "Tembé",
    "Lehali",
    "Turumsa",
    "Tenino",
    "Toaripi",
    "Tomoip",
    "Tunni",
    "Torona",
    "Western Totonac",
    "Touo",
    "Tonkawa",
    "Tirahi",
    "Terebu",
    "Copala Triqui",
    "Turi",
    "East Tarangan",
    "Trinidadian Creole English",
    "Lishán Didán",
    "Turaka",
    "Trió",
    "Toram",
    "Traveller Scottish",
    "Tregami",
    "Trinitario",
    "Tarao Naga",
    "Kok Borok",
    "San Martín Itunyoso Triqui",
    "Taushiro",
    "Chicahuaxtla Triqui",
    "Tunggare",
    "Turoyo",
    "Sediq",
    "Torwali",
    "Tringgus-Sembaan Bidayuh",
    "Turung",
    "Torá",
    "Tsaangi",
    "Tsamai",
    "Tswa",
    "Tsakonian",
    "Tunisian Sign Language",
    "Tausug",
    "Tsuvan",
    "Tsimshian",
    "Tshangla",
    "Tseku",
    "Ts'ün-Lao",
    "Turkish Sign Language",
    "Tswana",
    "Tsonga",
    "Northern Toussian",
    "Thai Sign Language",
    "Akei",
    "Taiwan Sign Language",
    "Tondi Songway Kiini",
    "Tsou",
    "Tsogo",
    "Tsishingini",
    "Mubami",
    "Tebul Sign Language",
    "Purepecha",
    "Tutelo",
    "Gaa",
    "Tektiteko",
    "Tauade",
    "Bwanabwana",
    "Tuotomb",
    "Tutong",
    "Upper Ta'oih",
    "Tobati",
    "Tooro",
    "Totoro",
    "Totela",
    "Northern Tutchone",
    "Towei",
    "Lower Ta'oih",
    "Tombelala",
    "Tawallammat Tamajaq",
    "Tera",
    "Northeastern Thai",
    "Muslim Tat",
    "Torau",
    "Titan",
    "Long Wat",
    "Sikaritai",
    "Tsum",
    "Wiarumus",
    "Tübatulabal",
    "Mutu",
    "Tuxá",
    "Tuyuca",
    "Central Tunebo",
    "Tunia",
    "Taulil",
    "Tupuri",
    "Tugutil",
    "Turkmen",
    "Tula",
    "Tumbuka",
    "Tunica",
    "Tucano",
    "Tedaga",
    "Turkish",
    "Tuscarora",
    "Tututni",
    "Turkana",
    "Tuxináwa",
    "Tugen",
    "Turka",
    "Vaghua",
    "Tsuvadi",
    "Te'un",
    "Southeast Ambrym",
    "Tuvalu",
    "Tela-Masbuar",
    "Tavoyan",
    "Tidore",
    "Taveta",
    "Tutsa Naga",
    "Tunen",
    "Sedoa",
    "Taivoan",
    "Timor Pidgin",
    "Twana",
    "Western Tawbuid",
    "Teshenawa",
    "Twents",
    "Tewa",
    "Northern Tiwa",
    "Tereweng",
    "Tai Dón",
    "Twi",
    "Tawara",
    "Tawang Monpa",
    "Twendi",
    "Tswapong",
    "Ere",
    "Tasawaq",
    "Southwestern Tarahumara",
    "Turiwára",
    "Termanu",
    "Tuwari",
    "Tewe",
    "Tawoyan",
    "Tombonuo",
    "Tokharian B",
    "Tsetsaut",
    "Totoli",
    "Tangut",
    "Thracian",
    "Ikpeng",
    "Tarjumo",
    "Tomini",
    "West Tarangan",
    "Toto",
    "Tii",
    "Tartessian",
    "Tonsea",
    "Citak",
    "Kayapó",
    "Tatana",
    "Tanosy Malagasy",
    "Tauya",
    "Kyanga",
    "O'du",
    "Teke-Tsaayi",
    "Tai Do",
    "Thu Lao",
    "Kombai",
    "Thaypan",
    "Tai Daeng",
    "Tày Sa Pa",
    "Tày Tac",
    "Kua",
    "Tuvinian",
    "Teke-Tyee",
    "Tiyaa",
    "Tày",
    "Tanzanian Sign Language",
    "Tzeltal",
    "Tz'utujil",
    "Talossan",
    "Central Atlas Tamazight",
    "Tugun",
    "Tzotzil",
    "Tabriak",
    "Uamué",
    "Kuan",
    "Tairuma",
    "Ubang",
    "Ubi",
    "Buhi'non Bikol",
    "Ubir",
    "Umbu-Ungu",
    "Ubykh",
    "Uda",
    "Udihe",
    "Muduga",
    "Udi",
    "Ujir",
    "Wuzlam",
    "Udmurt",
    "Uduk",
    "Kioko",
    "Ufim",
    "Ugaritic",
    "Kuku-Ugbanh",
    "Ughele",
    "Kubachi",
    "Ugandan Sign Language",
    "Ugong",
    "Uruguayan Sign Language",
    "Uhami",
    "Damal",
    "Uighur",
    "Uisai",
    "Iyive",
    "Tanjijili",
    "Kaburi",
    "Ukuriguma",
    "Ukhwejo",
    "Kui",
    "Muak Sa-aak",
    "Ukrainian Sign Language",
    "Ukpe-Bayobiri",
    "Ukwa",
    "Ukrainian",
    "Urubú-Kaapor Sign Language",
    "Ukue",
    "Kuku",
    "Ukwuani-Aboh-Ndoni",
    "Kuuk-Yak",
    "Fungwa",
    "Ulukwumi",
    "Ulch",
    "Lule",
    "Usku",
    "Ulithian",
    "Meriam Mir",
    "Ullatan",
    "Ulumanda'",
    "Unserdeutsch",
    "Uma' Lung",
    "Ulwa",
    "Umatilla",
    "Umbundu",
    "Marrucinian",
    "Umbindhamu",
    "Morrobalama",
    "Ukit",
    "Umon",
    "Makyan Naga",
    "Umotína",
    "Umpila",
    "Umbugarla",
    "Pendau",
    "Munsee",
    "North Watut",
    "Undetermined",
    "Uneme",
    "Ngarinyin",
    "Uni",
    "Enawené-Nawé",
    "Unami",
    "Kurnai",
    "Mundari",
    "Unubahe",
    "Munda",
    "Unde Kaili",
    "Kulon",
    "Umeda",
    "Uripiv-Wala-Rano-Atchin",
    "Urarina",
    "Urubú-Kaapor",
    "Urningangg",
    "Urdu",
    "Uru",
    "Uradhi",
    "Urigina",
    "Urhobo",
    "Urim",
    "Urak Lawoi'",
    "Urali",
    "Urapmin",
    "Uruangnirin",
    "Ura",
    "Uru-Pa-In",
    "Lehalurup",
    "Urat",
    "Urumi",
    "Uruava",
    "Sop",
    "Urimo",
    "Orya",
    "Uru-Eu-Wau-Wau",
    "Usarufa",
    "Ushojo",
    "Usui",
    "Usaghade",
    "Uspanteco",
    "us-Saare",
    "Uya",
    "Otank",
    "Ute-Southern Paiute",
    "ut-Hun",
    "Amba",
    "Etulo",
    "Utu",
    "Urum",
    "Ura",
    "U",
    "West Uvean",
    "Uri",
    "Lote",
    "Kuku-Uwanh",
    "Doko-Uyanga",
    "Uzbek",
    "Northern Uzbek",
    "Southern Uzbek",
    "Vaagri Booli",
    "Vale",
    "Vafsi",
    "Vagla",
    "Varhadi-Nagpuri",
    "Vai",
    "Sekele",
    "Vehes",
    "Vanimo",
    "Valman",
    "Vao",
    "Vaiphei",
    "Huarijio",
    "Vasavi",
    "Vanuma",
    "Varli",
    "Wayu",
    "Southeast Babar",
    "Southwestern Bontok",
    "Venetian",
    "Veddah",
    "Veluws",
    "Vemgo-Mabas",
    "Venda",
    "Ventureño",
    "Veps",
    "Mom Jango",
    "Vaghri",
    "Vlaamse Gebarentaal",
    "Virgin Islands Creole English",
    "Vidunda",
    "Vietnamese",
    "Vili",
    "Viemo",
    "Vilela",
    "Vinza",
    "Vishavan",
    "Viti",
    "Iduna",
    "Kariyarra",
    "Kujarge",
    "Kaur",
    "Kulisusu",
    "Kamakan",
    "Koro Nulu",
    "Kodeoha",
    "Korlai Creole Portuguese",
    "Tenggarong Kutai Malay",
    "Kurrama",
    "Koro Zuba",
    "Valpei",
    "Vlaams",
    "Martuyhunira",
    "Barbaram",
    "Juxtlahuaca Mixtec",
    "Mudu Koraga",
    "East Masela",
    "Mainfränkisch",
    "Lungalunga",
    "Maraghei",
    "Miwa",
    "Ixtayutla Mixtec",
    "Makhuwa-Shirima",
    "Malgana",
    "Mitlatongo Mixtec",
    "Soyaltepec Mazatec",
    "Soyaltepec Mixtec",
    "Marenje",
    "Moksela",
    "Muluridyi",
    "Valley Maidu",
    "Makhuwa",
    "Tamazola Mixtec",
    "Ayautla Mazatec",
    "Mazatlán Mazatec",
    "Vano",
    "Vinmavis",
    "Vunapu",
    "Volapük",
    "Voro",
    "Votic",
    "Vera'a",
    "Võro",
    "Varisi",
    "Burmbar",
    "Moldova Sign Language",
    "Venezuelan Sign Language",
    "Valencian Sign Language",
    "Vitou",
    "Vumbu",
    "Vunjo",
    "Vute",
    "Awa",
    "Walla Walla",
    "Wab",
    "Wasco-Wishram",
    "Wamesa",
    "Walser",
    "Wakoná",
    "Wa'ema",
    "Watubela",
    "Wares",
    "Waffa",
    "Wolaytta",
    "Wampanoag",
    "Wan",
    "Wappo",
    "Wapishana",
    "Wagiman",
    "Waray",
    "Washo",
    "Kaninuwa",
    "Waurá",
    "Waka",
    "Waiwai",
    "Watam",
    "Wayana",
    "Wampur",
    "Warao",
    "Wabo",
    "Waritai",
    "Wara",
    "Wanda",
    "Vwanji",
    "Alagwa",
    "Waigali",
    "Wakhi",
    "Wa",
    "Warlpiri",
    "Waddar",
    "Wagdi",
    "West Bengal Sign Language",
    "Warnman",
    "Wajarri",
    "Woi",
    "Yanomámi",
    "Waci Gbe",
    "Wandji",
    "Wadaginam",
    "Wadjiginy",
    "Wadikali",
    "Wendat",
    "Wadjigu",
    "Wadjabangayi",
    "Wewaw",
    "Wè Western",
    "Wedau",
    "Wergaia",
    "Weh",
    "Kiunum",
    "Weme Gbe",
    "Wemale",
    "Westphalien",
    "Weri",
    "Cameroon Pidgin",
    "Perai",
    "Rawngtu Chin",
    "Wejewa",
    "Yafi",
    "Wagaya",
    "Wagawaga",
    "Wangkangurru",
    "Wahgi",
    "Waigeo",
    "Wirangu",
    "Warrgamay",
    "Sou Upaa",
    "North Wahgi",
    "Wahau Kenyah",
    "Wahau Kayan",
    "Southern Toussian",
    "Wichita",
    "Wik-Epa",
    "Wik-Keyangan",
    "Wik Ngathan",
    "Wik-Me'anha",
    "Minidien",
    "Wik-Iiyanh",
    "Wikalkan",
    "Wilawila",
    "Wik-Mungkan",
    "Ho-Chunk",
    "Wiraféd",
    "Wiru",
    "Vitu",
    "Wiyot",
    "Waja",
    "Warji",
    "Kw'adza",
    "Kumbaran",
    "Wakde",
    "Kalanadi",
    "Keerray-Woorroong",
    "Kunduvadi",
    "Wakawaka",
    "Wangkayutyuru",
    "Walio",
    "Mwali Comorian",
    "Wolane",
    "Kunbarlang",
    "Welaun",
    "Waioli",
    "Wailaki",
    "Wali",
    "Middle Welsh",
    "Walloon",
    "Wolio",
    "Wailapa",
    "Wallisian",
    "Wuliwuli",
    "Wichí Lhamtés Vejoz",
    "Walak",
    "Wali",
    "Waling",
    "Mawa",
    "Wambaya",
    "Wamas",
    "Mamaindé",
    "Wambule",
    "Western Minyag",
    "Waima'a",
    "Wamin",
    "Maiwa",
    "Waamwang",
    "Wom",
    "Wambon",
    "Walmajarri",
    "Mwani",
    "Womo",
    "Wanambre",
    "Wantoat",
    "Wandarang",
    "Waneci",
    "Wanggom",
    "Ndzwani Comorian",
    "Wanukaka",
    "Wanggamala",
    "Wunumara",
    "Wano",
    "Wanap",
    "Usan",
    "Wintu",
    "Wanyi",
    "Kuwema",
    "Wè Northern",
    "Wogeo",
    "Wolani",
    "Woleaian",
    "Gambian Wolof",
    "Wogamusin",
    "Kamang",
    "Longto",
    "Wolof",
    "Wom",
    "Wongo",
    "Manombai",
    "Woria",
    "Hanga Hundi",
    "Wawonii",
    "Weyto",
    "Maco",
    "Waluwarra",
    "Warungu",
    "Wiradjuri",
    "Wariyangga",
    "Garrwa",
    "Warlmanpa",
    "Warumungu",
    "Warnang",
    "Worrorra",
    "Waropen",
    "Wardaman",
    "Waris",
    "Waru",
    "Waruna",
    "Gugu Warra",
    "Wae Rana",
    "Merwari",
    "Waray",
    "Warembori",
    "Adilabad Gondi",
    "Wusi",
    "Waskia",
    "Owenia",
    "Wasa",
    "Wasu",
    "Wotapuri-Katarqalai",
    "Watiwa",
    "Wathawurrung",
    "Berta",
    "Watakataui",
    "Mewati",
    "Wotu",
    "Wikngenchera",
    "Wunambal",
    "Wudu",
    "Wutunhua",
    "Silimo",
    "Wumbvu",
    "Bungu",
    "Wurrugu",
    "Wutung",
    "Wu Chinese",
    "Wuvulu-Aua",
    "Wulna",
    "Wauyai",
    "Waama",
    "Wakabunga",
    "Wetamut",
    "Warrwa",
    "Wawa",
    "Waxianghua",
    "Wardandi",
    "Wangaaybuwan-Ngiyambaa",
    "Woiwurrung",
    "Wymysorys",
    "Wyandot",
    "Wayoró",
    "Western Fijian",
    "Andalusian Arabic",
    "Sambe",
    "Kachari",
    "Adai",
    "Aequian",
    "Aghwan",
    "Kaimbé",
    "Ararandewára",
    "Máku",
    "Kalmyk",
    "ǀXam",
    "Xamtanga",
    "Khao",
    "Apalachee",
    "Aquitanian",
    "Karami",
    "Kamas",
    "Katawixi",
    "Kauwera",
    "Xavánte",
    "Kawaiisu",
    "Kayan Mahakam",
    "Lower Burdekin",
    "Bactrian",
    "Bindal",
    "Bigambal",
    "Bunganditj",
    "Kombio",
    "Birrpayi",
    "Middle Breton",
    "Kenaboi",
    "Bolgarian",
    "Bibbulman",
    "Kambera",
    "Kambiwá",
    "Batjala",
    "Cumbric",
    "Camunic",
    "Celtiberian",
    "Cisalpine Gaulish",
    "Chemakum",
    "Classical Armenian",
    "Comecrudo",
    "Cotoname",
    "Chorasmian",
    "Carian",
    "Classical Tibetan",
    "Curonian",
    "Chuvantsy",
    "Coahuilteco",
    "Cayuse",
    "Darkinyung",
    "Dacian",
    "Dharuk",
    "Edomite",
    "Kwandu",
    "Kaitag",
    "Malayic Dayak",
    "Eblan",
    "Hdi",
    "ǁXegwi",
    "Kelo",
    "Kembayan",
    "Epi-Olmec",
    "Xerénte",
    "Kesawai",
    "Xetá",
    "Keoru-Ahia",
    "Faliscan",
    "Galatian",
    "Gbin",
    "Gudang",
    "Gabrielino-Fernandeño",
    "Goreng",
    "Garingbal",
    "Galindan",
    "Dharumbal",
    "Garza",
    "Unggumi",
    "Guwa",
    "Harami",
    "Hunnic",
    "Hadrami",
    "Khetrani",
    "Middle Khmer",
    "Xhosa",
    "Hernican",
    "Hattic",
    "Hurrian",
    "Khua",
    "Iberian",
    "Xiri",
    "Illyrian",
    "Xinca",
    "Xiriâna",
    "Kisan",
    "Indus Valley Language",
    "Xipaya",
    "Minjungbal",
    "Jaitmatang",
    "Kalkoti",
    "Northern Nago",
    "Kho'ini",
    "Mendalam Kayan",
    "Kereho",
    "Khengkha",
    "Kagoro",
    "Kenyan Sign Language",
    "Kajali",
    "Kachok",
    "Mainstream Kenyah",
    "Kayan River Kayan",
    "Kiorr",
    "Kabatei",
    "Koroni",
    "Xakriabá",
    "Kumbewaha",
    "Kantosi",
    "Kaamba",
    "Kgalagadi",
    "Kembra",
    "Karore",
    "Uma' Lasan",
    "Kurtokha",
    "Kamula",
    "Loup B",
    "Lycian",
    "Lydian",
    "Lemnian",
    "Ligurian",
    "Liburnian",
    "Alanic",
    "Loup A",
    "Lepontic",
    "Lusitanian",
    "Cuneiform Luwian",
    "Elymian",
    "Mushungulu",
    "Mbonga",
    "Makhuwa-Marrevone",
    "Mbudum",
    "Median",
    "Mingrelian",
    "Mengaka",
    "Kugu-Muminh",
    "Majera",
    "Ancient Macedonian",
    "Malaysian Sign Language",
    "Manado Malay",
    "Manichaean Middle Persian",
    "Morerebi",
    "Kuku-Mu'inh",
    "Kuku-Mangk",
    "Meroitic",
    "Moroccan Sign Language",
    "Matbat",
    "Kamu",
    "Antankarana Malagasy",
    "Tsimihety Malagasy",
    "Salawati",
    "Mayaguduna",
    "Mori Bawah",
    "Ancient North Arabian",
    "Kanakanabu",
    "Middle Mongolian",
    "Kuanhua",
    "Ngarigu",
    "Ngoni",
    "Nganakarti",
    "Ngumbarl",
    "Northern Kankanay",
    "Anglo-Norman",
    "Ngoni",
    "Kangri",
    "Kanashi",
    "Narragansett",
    "Nukunul",
    "Nyiyaparli",
    "Kenzi",
    "O'chi'chi'",
    "Kokoda",
    "Soga",
    "Kominimung",
    "Xokleng",
    "Komo",
    "Konkomba",
    "Xukurú",
    "Kopar",
    "Korubo",
    "Kowaki",
    "Pirriya",
    "Northeastern Tasmanian",
    "Pecheneg",
    "Oyster Bay Tasmanian",
    "Liberia Kpelle",
    "Southeast Tasmanian",
    "Phrygian",
    "North Midlands Tasmanian",
    "Pictish",
    "Mpalitjanh",
    "Kulina Pano",
    "Port Sorell Tasmanian",
    "Pumpokol",
    "Kapinawá",
    "Pochutec",
    "Puyo-Paekche",
    "Mohegan-Pequot",
    "Parthian",
    "Pisidian",
    "Punthamara",
    "Punic",
    "Northern Tasmanian",
    "Northwestern Tasmanian",
    "Southwestern Tasmanian",
    "Puyo",
    "Bruny Island Tasmanian",
    "Karakhanid",
    "Qatabanian",
    "Krahô",
    "Eastern Karaboro",
    "Gundungurra",
    "Kreye",
    "Minang",
    "Krikati-Timbira",
    "Armazic",
    "Arin",
    "Raetic",
    "Aranama-Tamique",
    "Marriammu",
    "Karawa",
    "Sabaean",
    "Sambal",
    "Scythian",
    "Sidetic",
    "Sempan",
    "Shamang",
    "Sio",
    "Subi",
    "South Slavey",
    "Kasem",
    "Sanga",
    "Solano",
    "Silopi",
    "Makhuwa-Saka",
    "Sherpa",
    "Assan",
    "Sanumá",
    "Sudovian",
    "Saisiyat",
    "Alcozauca Mixtec",
    "Chazumba Mixtec",
    "Katcha-Kadugli-Miri",
    "Diuxi-Tilantongo Mixtec",
    "Ketengban",
    "Transalpine Gaulish",
    "Yitha Yitha",
    "Sinicahua Mixtec",
    "San Juan Teita Mixtec",
    "Tijaltepec Mixtec",
    "Magdalena Peñasco Mixtec",
    "Northern Tlaxiaco Mixtec",
    "Tokharian A",
    "San Miguel Piedras Mixtec",
    "Tumshuqese",
    "Early Tripuri",
    "Sindihui Mixtec",
    "Tacahua Mixtec",
    "Cuyamecalco Mixtec",
    "Thawa",
    "Tawandê",
    "Yoloxochitl Mixtec",
    "Alu Kurumba",
    "Betta Kurumba",
    "Umiida",
    "Kunigami",
    "Jennu Kurumba",
    "Ngunawal",
    "Umbrian",
    "Unggaranggu",
    "Kuo",
    "Upper Umpqua",
    "Urartian",
    "Kuthant",
    "Kxoe",
    "Venetic",
    "Kamviri",
    "Vandalic",
    "Volscian",
    "Vestinian",
    "Kwaza",
    "Woccon",
    "Wadi Wadi",
    "Xwela Gbe",
    "Kwegu",
    "Wajuk",
    "Wangkumara",
    "Western Xwla Gbe",
    "Written Oirat",
    "Kwerba Mamberamo",
    "Wotjobaluk",
    "Wemba Wemba",
    "Boro",
    "Ke'o",
    "Minkin",
    "Koropó",
    "Tambora",
    "Yaygir",
    "Yandjibara",
    "Mayi-Yapi",
    "Mayi-Kulan",
    "Yalakalore",
    "Mayi-Thakurti",
    "Yorta Yorta",
    "Zhang-Zhung",
    "Zemgalian",
    "Ancient Zapotec",
    "Yaminahua",
    "Yuhup",
    "Pass Valley Yali",
    "Yagua",
    "Pumé",
    "Yaka",
    "Yámana",
    "Yazgulyam",
    "Yagnobi",
    "Banda-Yangere",
    "Yakama",
    "Yalunka",
    "Yamba",
    "Mayangna",
    "Yao",
    "Yapese",
    "Yaqui",
    "Yabarana",
    "Nugunu",
    "Yambeta",
    "Yuwana",
    "Yangben",
    "Yawalapití",
    "Yauma",
    "Agwagwune",
    "Lokaa",
    "Yala",
    "Yemba",
    "West Yugur",
    "Yakha",
    "Yamphu",
    "Hasha",
    "Bokha",
    "Yukuben",
    "Yaben",
    "Yabaâna",
    "Yabong",
    "Yawiyo",
    "Yaweyuha",
    "Chesu",
    "Lolopo",
    "Yucuna",
    "Chepya",
    "Yanda",
    "Eastern Yiddish",
    "Yangum Dey",
    "Yidgha",
    "Yoidik",
    "Ravula",
    "Yeniche",
    "Yimas",
    "Yeni",
    "Yevanic",
    "Yela",
    "Tarok",
    "Nyankpa",
    "Yetfa",
    "Yerukula",
    "Yapunda",
    "Yeyi",
    "Malyangapa",
    "Yiningayi",
    "Yangum Gel",
    "Yagomi",
    "Gepo",
    "Yagaria",
    "Yolŋu Sign Language",
    "Yugul",
    "Yagwoia",
    "Baha Buyang",
    "Judeo-Iraqi Arabic",
    "Hlepho Phowa",
    "Yan-nhaŋu Sign Language",
    "Yinggarda",
    "Yiddish",
    "Ache",
    "Wusa Nasu",
    "Western Yiddish",
    "Yidiny",
    "Yindjibarndi",
    "Dongshanba Lalo",
    "Yindjilandji",
    "Yimchungru Naga",
    "Riang Lai",
    "Pholo",
    "Miqie",
    "North Awyu",
    "Yis",
    "Eastern Lalu",
    "Awu",
    "Northern Nisu",
    "Axi Yi",
    "Azhe",
    "Yakan",
    "Northern Yukaghir",
    "Yoke",
    "Yakaikeke",
    "Khlula",
    "Kap",
    "Kua-nsi",
    "Yasa",
    "Yekora",
    "Kathu",
    "Kuamasi",
    "Yakoma",
    "Yaul",
    "Yaleba",
    "Yele",
    "Yelogu",
    "Angguruk Yali",
    "Yil",
    "Limi",
    "Langnian Buyang",
    "Naluo Yi",
    "Yalarnnga",
    "Aribwaung",
    "Nyâlayu",
    "Yambes",
    "Southern Muji",
    "Muda",
    "Yameo",
    "Yamongeri",
    "Mili",
    "Moji",
    "Makwe",
    "Iamalele",
    "Maay",
    "Yamna",
    "Yangum Mon",
    "Yamap",
    "Qila Muji",
    "Malasar",
    "Mysian",
    "Northern Muji",
    "Muzi",
    "Aluo",
    "Yandruwandha",
    "Lang'e",
    "Yango",
    "Naukan Yupik",
    "Yangulam",
    "Yana",
    "Yong",
    "Yendang",
    "Yansi",
    "Yahuna",
    "Yoba",
    "Yogad",
    "Yonaguni",
    "Yokuts",
    "Yola",
    "Yombe",
    "Yongkom",
    "Yoruba",
    "Yotti",
    "Yoron",
    "Yoy",
    "Phala",
    "Labo Phowa",
    "Phola",
    "Phupha",
    "Phuma",
    "Ani Phowa",
    "Alo Phola",
    "Phupa",
    "Phuza",
    "Yerakai",
    "Yareba",
    "Yaouré",
    "Nenets",
    "Nhengatu",
    "Yirrk-Mel",
    "Yerong",
    "Yaroamë",
    "Yarsun",
    "Yarawata",
    "Yarluyandi",
    "Yassic",
    "Samatao",
    "Sonaga",
    "Yugoslavian Sign Language",
    "Myanmar Sign Language",
    "Sani",
    "Nisi",
    "Southern Lolopo",
    "Sirenik Yupik",
    "Yessan-Mayo",
    "Sanie",
    "Talu",
    "Tanglang",
    "Thopho",
    "Yout Wam",
    "Yatay",
    "Yucateco",
    "Yugambal",
    "Yuchi",
    "Judeo-Tripolitanian Arabic",
    "Yue Chinese",
    "Havasupai-Walapai-Yavapai",
    "Yug",
    "Yurutí",
    "Karkar-Yuri",
    "Yuki",
    "Yulu",
    "Quechan",
    "Bena",
    "Yukpa",
    "Yuqui",
    "Yurok",
    "Yopno",
    "Yau",
    "Southern Yukaghir",
    "East Yugur",
    "Yuracare",
    "Yawa",
    "Yavitero",
    "Kalou",
    "Yinhawangka",
    "Western Lalu",
    "Yawanawa",
    "Wuding-Luquan Yi",
    "Yawuru",
    "Xishanba Lalo",
    "Wumeng Nasu",
    "Yawarawarga",
    "Mayawali",
    "Yagara",
    "Yardliyawarra",
    "Yinwum",
    "Yuyu",
    "Yabula Yabula",
    "Yir Yoront",
    "Yau",
    "Ayizi",
    "E'ma Buyang",
    "Zokhuo",
    "Sierra de Juárez Zapotec",
    "Western Tlacolula Valley Zapotec",
    "Ocotlán Zapotec",
    "Cajonos Zapotec",
    "Yareni Zapotec",
    "Ayoquesco Zapotec",
    "Zaghawa",
    "Zangwal",
    "Isthmus Zapotec",
    "Zaramo",
    "Zanaki",
    "Zauzou",
    "Miahuatlán Zapotec",
    "Ozolotepec Zapotec",
    "Zapotec",
    "Aloápam Zapotec",
    "Rincón Zapotec",
    "Santo Domingo Albarradas Zapotec",
    "Tabaa Zapotec",
    "Zangskari",
    "Yatzachi Zapotec",
    "Mitla Zapotec",
    "Xadani Zapotec",
    "Zayse-Zergulla",
    "Zari",
    "Balaibalan",
    "Central Berawan",
    "East Berawan",
    "Blissymbols",
    "Batui",
    "Bu",
    "West Berawan",
    "Coatecas Altas Zapotec",
    "Las Delicias Zapotec",
    "Central Hongshuihe Zhuang",
    "Ngazidja Comorian",
    "Zeeuws",
    "Zenag",
    "Eastern Hongshuihe Zhuang",
    "Zenaga",
    "Kinga",
    "Guibei Zhuang",
    "Standard Moroccan Tamazight",
    "Minz Zhuang",
    "Guibian Zhuang",
    "Magori",
    "Zhuang",
    "Zhaba",
    "Dai Zhuang",
    "Zhire",
    "Nong Zhuang",
    "Chinese",
    "Zhoa",
    "Zia",
    "Zimbabwe Sign Language",
    "Zimakani",
    "Zialo",
    "Mesme",
    "Zinza",
    "Zigula",
    "Zizilivakan",
    "Kaimbulawa",
    "Koibal",
    "Kadu",
    "Koguryo",
    "Khorezmian",
    "Karankawa",
    "Kanan",
    "Kott",
    "São Paulo Kaingáng",
    "Zakhring",
    "Kitan",
    "Kaurna",
    "Krevinian",
    "Khazar",
    "Zula",
    "Liujiang Zhuang",
    "Malay",
    "Lianshan Zhuang",
    "Liuqian Zhuang",
    "Manda",
    "Zimba",
    "Margany",
    "Maridan",
    "Mangerr",
    "Mfinu",
    "Marti Ke",
    "Makolkol",
    "Negeri Sembilan Malay",
    "Maridjabin",
    "Mandandanyi",
    "Matngala",
    "Marimanindji",
    "Mbangwe",
    "Molo",
    "Mpuono",
    "Mituku",
    "Maranunggu",
    "Mbesa",
    "Maringarr",
    "Muruwari",
    "Mbariman-Gudhinma",
    "Mbo",
    "Bomitaba",
    "Mariyedi",
    "Mbandja",
    "Zan Gula",
    "Zande",
    "Mang",
    "Manangkari",
    "Mangas",
    "Copainalá Zoque",
    "Chimalapa Zoque",
    "Zou",
    "Asunción Mixtepec Zapotec",
    "Tabasco Zoque",
    "Rayón Zoque",
    "Francisco León Zoque",
    "Lachiguiri Zapotec",
    "Yautepec Zapotec",
    "Choapan Zapotec",
    "Southeastern Ixtlán Zapotec",
    "Petapa Zapotec",
    "San Pedro Quiatoni Zapotec",
    "Guevea De Humboldt Zapotec",
    "Totomachapan Zapotec",
    "Santa María Quiegolani Zapotec",
    "Quiavicuzas Zapotec",
    "Tlacolulita Zapotec",
    "Lachixío Zapotec",
    "Mixtepec Zapotec",
    "Santa Inés Yatzechi Zapotec",
    "Amatlán Zapotec",
    "El Alto Zapotec",
    "Zoogocho Zapotec",
    "Santiago Xanica Zapotec",
    "Coatlán Zapotec",
    "San Vicente Coatlán Zapotec",
    "Yalálag Zapotec",
    "Chichicapan Zapotec",
    "Zaniza Zapotec",
    "San Baltazar Loxicha Zapotec",
    "Mazaltepec Zapotec",
    "Texmelucan Zapotec",
    "Qiubei Zhuang",
    "Kara",
    "Mirgan",
    "Zerenkel",
    "Záparo",
    "Zarphatic",
    "Mairasi",
    "Sarasira",
    "Kaskean",
    "Zambian Sign Language",
    "Standard Malay",
    "Southern Rincon Zapotec",
    "Sukurum",
    "Elotepec Zapotec",
    "Xanaguía Zapotec",
    "Lapaguía-Guivini Zapotec",
    "San Agustín Mixtepec Zapotec",
    "Santa Catarina Albarradas Zapotec",
    "Loxicha Zapotec",
    "Quioquitani-Quierí Zapotec",
    "Tilquiapan Zapotec",
    "Tejalapan Zapotec",
    "Güilá Zapotec",
    "Zaachila Zapotec",
    "Yatee Zapotec",
    "Zeem",
    "Tokano",
    "Zulu",
    "Kumzari",
    "Zuni",
    "Zumaya",
    "Zay",
    "No linguistic content",
    "Yongbei Zhuang",
    "Yang Zhuang",
    "Youjiang Zhuang",
    "Yongnan Zhuang",
    "Zyphe Chin",
    "Zaza",
    "Zuojiang Zhuang",
)
